# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI
from pydantic import BaseModel, conint, conlist

from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")

Digit = conint(ge=0, le=9)
GridRows = conlist(conlist(Digit, min_length=9, max_length=9), min_length=9, max_length=9)


class GridModel(BaseModel):
    grid: GridRows


class SanityRequest(BaseModel):
    original: GridRows
    current: GridRows


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)


@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid)
