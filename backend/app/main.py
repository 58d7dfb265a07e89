from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lgsolver import solve_system

app = FastAPI(title="lgsolver API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Cell = Union[str, float]


class SystemRequest(BaseModel):
    matrix: list[list[Cell]]
    vector: list[Cell]
    precision: Union[int, str] = 3
    theme: str = "light"


class StepInfo(BaseModel):
    step_number: int
    kind: str
    description: str
    markup: str
    latex: str


class CheckInfo(BaseModel):
    step_number: int
    description: str
    expression: str
    explanation: str


class SolveResponse(BaseModel):
    classification: str
    rank: int
    particular: Optional[list[str]]
    basis: list[list[str]]
    steps: list[StepInfo]
    final_answer: str
    verification_steps: list[CheckInfo]
    markup: str
    latex: str
    summary: dict


def _strings(values):
    return [str(v) for v in values]


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: SystemRequest):
    if not req.matrix:
        raise HTTPException(status_code=400, detail="Matrix cannot be empty.")

    try:
        result = solve_system(req.matrix, req.vector, req.precision, theme=req.theme)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    solution = result["solution"]
    particular = solution["particular"]
    return {
        "classification": result["classification"],
        "rank": solution["rank"],
        "particular": _strings(particular) if particular is not None else None,
        "basis": [_strings(v) for v in solution["basis"]],
        "steps": result["steps"],
        "final_answer": result["final_answer"],
        "verification_steps": result["verification_steps"],
        "markup": result["markup"],
        "latex": result["latex"],
        "summary": result["summary"],
    }
