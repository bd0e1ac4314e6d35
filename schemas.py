# schemas.py
from pydantic import BaseModel, Field, constr, field_validator
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from periods import to_local


class TransactionType(str, Enum):
    income = "income"
    expense = "expense"


class Category(str, Enum):
    food = "food"
    entertainment = "entertainment"
    shopping = "shopping"
    transport = "transport"


class UserBase(BaseModel):
    username: constr(min_length=3, max_length=50)


class UserCreate(UserBase):
    password: str
    monthlyBudget: float = Field(default=0.0, ge=0)


class UserLogin(UserBase):
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TransactionCreate(BaseModel):
    type: TransactionType
    amount: float = Field(ge=0)
    date: Optional[datetime] = None
    category: Optional[str] = None
    description: Optional[str] = None

    @field_validator("date")
    @classmethod
    def date_to_local(cls, value):
        return to_local(value)


class TransactionResponse(BaseModel):
    id: int
    user_id: str
    type: TransactionType
    category: Optional[str] = None
    amount: float
    date: datetime
    description: Optional[str] = None

    class Config:
        from_attributes = True


class MonthlyBudget(BaseModel):
    monthlyBudget: float = Field(ge=0)


class MonthSummary(BaseModel):
    totalIncome: float
    totalExpenses: float
    currentBalance: float
    monthlyBudget: float
    budgetUtilization: Optional[float] = None


class AdviceRequest(BaseModel):
    expenseAmount: float
    currentBalance: float
    monthlyBudget: float
    category: Optional[str] = None
    # Accepted for client compatibility; no rule reads it
    recentTransactions: list[Any] = Field(default_factory=list)


class AdviceResponse(BaseModel):
    advice: str


class FCMTokenUpdate(BaseModel):
    fcmToken: str


class SuccessResponse(BaseModel):
    success: bool = True
