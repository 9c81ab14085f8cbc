from services.budget import find_budget
from services.expense import total_expenses
from services.income import total_income
from services.savings import total_savings


def monthly_summary(user_id, year, month):
    income = total_income(user_id, year, month)
    expenses = total_expenses(user_id, year, month)
    saved = total_savings(user_id, year, month)
    remaining = income - expenses - saved
    budget = find_budget(user_id, year, month)

    return {
        "year": year,
        "month": month,
        "totalIncome": float(income),
        "totalExpenses": float(expenses),
        "totalSavings": float(saved),
        "remaining": float(remaining),
        "isNegative": remaining < 0,
        "budget": float(budget.amount) if budget else None,
    }
