"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loancalc.api.routes import calculator, products
from loancalc.config import configure_logging

configure_logging()

app = FastAPI(
    title="Loan Calculator",
    description="Card installment and credit-card repayment schedules",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router)
app.include_router(products.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
