"""
Finance Tracker API Test Suite

This package contains tests for the Finance Tracker REST API:

- test_auth.py: Registration, login and profile tests
- test_budget.py: Budget creation, lookup and remaining-budget tests
- test_income.py: Income CRUD and monthly total tests
- test_expenses.py: Expense CRUD, category search and monthly aggregate tests
- test_savings.py: Savings CRUD, monthly totals and available-funds tests
- test_summary.py: Monthly summary tests
- test_security.py: Bearer token guard and cross-user isolation tests
- test_periods.py: Month range and date parsing helpers

Run all tests:
    pytest tests/

Run specific test file:
    pytest tests/test_auth.py

Run with coverage:
    pytest tests/ --cov=. --cov-report=html
"""
