"""
Test suite for expense routes.
Tests cover expense CRUD operations, category search and monthly aggregates.
"""

import pytest


def add_expense(client, headers, amount=100, date='2024-05-15', category='Food', description='Lunch'):
    payload = {'amount': amount, 'date': date}
    if category is not None:
        payload['category'] = category
    if description is not None:
        payload['description'] = description
    return client.post('/expenses', json=payload, headers=headers)


class TestAddExpense:
    """Test adding expenses."""

    def test_add_expense_valid(self, client, auth_headers):
        """Valid expense should be created."""
        response = add_expense(client, auth_headers, amount='42.50')
        assert response.status_code == 201
        body = response.get_json()
        assert body['amount'] == 42.5
        assert body['category'] == 'Food'
        assert body['description'] == 'Lunch'
        assert body['date'] == '2024-05-15T00:00:00'

    def test_add_expense_optional_fields(self, client, auth_headers):
        """Category and description are optional."""
        response = add_expense(client, auth_headers, category=None, description=None)
        assert response.status_code == 201
        body = response.get_json()
        assert body['category'] is None
        assert body['description'] is None

    def test_add_expense_utc_timestamp(self, client, auth_headers):
        """Timezone-aware timestamps are stored in UTC."""
        response = add_expense(client, auth_headers, date='2024-05-31T23:30:00-02:00')
        assert response.status_code == 201
        assert response.get_json()['date'] == '2024-06-01T01:30:00'

    def test_add_expense_zulu_timestamp(self, client, auth_headers):
        """Client ISO strings ending in Z are accepted."""
        response = add_expense(client, auth_headers, date='2024-05-10T08:15:00.000Z')
        assert response.status_code == 201
        assert response.get_json()['date'] == '2024-05-10T08:15:00'

    @pytest.mark.parametrize("amount", [0, -5, '0.001', 'ten', True, '10000000000', 1e12])
    def test_add_expense_invalid_amount(self, client, auth_headers, amount):
        """Amounts below one cent or non-numeric are rejected."""
        response = add_expense(client, auth_headers, amount=amount)
        assert response.status_code == 400
        assert 'amount' in response.get_json()['errors']

    @pytest.mark.parametrize("date", [
        '', 'yesterday', '2024-13-01', '9999-12-15', '9998-12-31T23:00:00-05:00',
    ])
    def test_add_expense_invalid_date(self, client, auth_headers, date):
        """Dates must be ISO 8601."""
        response = add_expense(client, auth_headers, date=date)
        assert response.status_code == 400
        assert 'date' in response.get_json()['errors']


class TestExpenseList:
    """Test expense listing and filtering."""

    def test_list_newest_first(self, client, auth_headers):
        """Expenses are listed by date, descending."""
        add_expense(client, auth_headers, date='2024-01-15', description='Jan')
        add_expense(client, auth_headers, date='2024-03-15', description='Mar')
        add_expense(client, auth_headers, date='2024-02-15', description='Feb')

        response = client.get('/expenses', headers=auth_headers)
        assert response.status_code == 200
        assert [e['description'] for e in response.get_json()] == ['Mar', 'Feb', 'Jan']

    def test_list_empty(self, client, auth_headers):
        """A user without expenses gets an empty list."""
        response = client.get('/expenses', headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json() == []

    def test_category_search_case_insensitive(self, client, auth_headers):
        """Category search matches substrings regardless of case."""
        add_expense(client, auth_headers, category='Groceries')
        add_expense(client, auth_headers, category='Transport')

        response = client.get('/expenses/category/GROC', headers=auth_headers)
        assert response.status_code == 200
        assert [e['category'] for e in response.get_json()] == ['Groceries']

    def test_category_search_no_match(self, client, auth_headers):
        """No matching category is not-found."""
        add_expense(client, auth_headers, category='Food')
        response = client.get('/expenses/category/Travel', headers=auth_headers)
        assert response.status_code == 404

    def test_month_listing_uses_date_range(self, client, auth_headers):
        """Month listing covers the first instant up to, not including, next month."""
        add_expense(client, auth_headers, date='2024-04-30T23:59:59', description='April')
        add_expense(client, auth_headers, date='2024-05-01T00:00:00', description='First')
        add_expense(client, auth_headers, date='2024-05-31T23:59:59', description='Last')
        add_expense(client, auth_headers, date='2024-06-01T00:00:00', description='June')

        response = client.get('/expenses/2024/5', headers=auth_headers)
        assert response.status_code == 200
        assert [e['description'] for e in response.get_json()] == ['Last', 'First']

    def test_month_listing_december(self, client, auth_headers):
        """December rolls the range over into the next year."""
        add_expense(client, auth_headers, date='2024-12-31', description='NYE')
        add_expense(client, auth_headers, date='2025-01-01', description='NY')

        response = client.get('/expenses/2024/12', headers=auth_headers)
        assert [e['description'] for e in response.get_json()] == ['NYE']

    def test_month_listing_empty_not_found(self, client, auth_headers):
        """A month without expenses is not-found."""
        response = client.get('/expenses/2024/5', headers=auth_headers)
        assert response.status_code == 404


class TestExpenseTotal:
    """Test the monthly expense total."""

    @pytest.mark.parametrize("amounts", [
        [],
        [0.01],
        [10.10, 20.20, 30.30],
        [1999.99, 0.01, 45.5, 12, 7.77],
    ])
    def test_total_matches_sum_of_month(self, client, auth_headers, amounts):
        """The month total equals the sum of the month's expenses."""
        for day, amount in enumerate(amounts, start=1):
            add_expense(client, auth_headers, amount=amount, date=f'2024-05-{day:02d}')
        add_expense(client, auth_headers, amount=500, date='2024-06-01')

        total = client.get('/expenses/total/2024/5', headers=auth_headers).get_json()['total']
        assert total == pytest.approx(sum(amounts))

        if amounts:
            listed = client.get('/expenses/2024/5', headers=auth_headers).get_json()
            assert total == pytest.approx(sum(e['amount'] for e in listed))


class TestEditExpense:
    """Test updating expenses."""

    def test_edit_expense_partial(self, client, auth_headers):
        """Only supplied fields change."""
        expense_id = add_expense(client, auth_headers).get_json()['id']
        response = client.patch(f'/expenses/{expense_id}', json={'description': 'Dinner'},
                                headers=auth_headers)
        assert response.status_code == 200
        body = response.get_json()
        assert body['description'] == 'Dinner'
        assert body['amount'] == 100
        assert body['category'] == 'Food'

    def test_edit_amount_changes_total(self, client, auth_headers):
        """Updating an amount changes the month total."""
        expense_id = add_expense(client, auth_headers, amount=100).get_json()['id']
        add_expense(client, auth_headers, amount=50)

        client.patch(f'/expenses/{expense_id}', json={'amount': 250}, headers=auth_headers)
        assert client.get('/expenses/total/2024/5', headers=auth_headers).get_json()['total'] == 300

    def test_edit_date_moves_between_months(self, client, auth_headers):
        """Updating a date moves the amount to the other month's aggregate."""
        expense_id = add_expense(client, auth_headers, amount=75, date='2024-05-20').get_json()['id']

        response = client.patch(f'/expenses/{expense_id}', json={'date': '2024-07-02'},
                                headers=auth_headers)
        assert response.status_code == 200
        assert client.get('/expenses/total/2024/5', headers=auth_headers).get_json()['total'] == 0
        assert client.get('/expenses/total/2024/7', headers=auth_headers).get_json()['total'] == 75
        assert client.get('/expenses/2024/5', headers=auth_headers).status_code == 404

    def test_edit_expense_invalid_amount(self, client, auth_headers):
        """Updates are validated like creations."""
        expense_id = add_expense(client, auth_headers).get_json()['id']
        response = client.patch(f'/expenses/{expense_id}', json={'amount': -1}, headers=auth_headers)
        assert response.status_code == 400

    def test_edit_expense_not_found(self, client, auth_headers):
        """Editing non-existent expense should return 404."""
        response = client.patch('/expenses/999', json={'amount': 1}, headers=auth_headers)
        assert response.status_code == 404

    def test_blank_text_clears_fields(self, client, auth_headers):
        """Blank category and description are stored as empty, the same as on create."""
        expense_id = add_expense(client, auth_headers).get_json()['id']
        response = client.patch(f'/expenses/{expense_id}', json={'category': '  ', 'description': ''},
                                headers=auth_headers)
        assert response.status_code == 200
        body = response.get_json()
        assert body['category'] is None
        assert body['description'] is None
        assert body['amount'] == 100

        created = add_expense(client, auth_headers, category='', description='').get_json()
        assert created['category'] is None
        assert created['description'] is None

    def test_edit_date_past_last_year_rejected(self, client, auth_headers):
        """Dates whose month cannot be bounded are rejected."""
        expense_id = add_expense(client, auth_headers).get_json()['id']
        response = client.patch(f'/expenses/{expense_id}', json={'date': '9999-06-01'},
                                headers=auth_headers)
        assert response.status_code == 400
        assert 'date' in response.get_json()['errors']


class TestExpensePeriodBounds:
    """Test year limits on month paths."""

    @pytest.mark.parametrize("url", [
        '/expenses/total/10000/1',
        '/expenses/total/9999/12',
        '/expenses/9999/1',
    ])
    def test_year_past_range_rejected(self, client, auth_headers, url):
        """Years past the supported range are a bad request."""
        response = client.get(url, headers=auth_headers)
        assert response.status_code == 400
        assert response.get_json()['message'] == 'year must be between 1900 and 9998'

    def test_last_supported_december(self, client, auth_headers):
        """December of the last supported year has a total."""
        add_expense(client, auth_headers, amount=12, date='9998-12-31T23:59:59')
        response = client.get('/expenses/total/9998/12', headers=auth_headers)
        assert response.status_code == 200
        assert response.get_json()['total'] == 12


class TestDeleteExpense:
    """Test deleting expenses."""

    def test_delete_expense(self, client, auth_headers):
        """Delete returns no content and removes the expense."""
        expense_id = add_expense(client, auth_headers).get_json()['id']

        response = client.delete(f'/expenses/{expense_id}', headers=auth_headers)
        assert response.status_code == 204
        assert response.data == b''
        assert client.get('/expenses', headers=auth_headers).get_json() == []

    def test_delete_nonexistent_expense(self, client, auth_headers):
        """Deleting a missing expense is not-found."""
        response = client.delete('/expenses/999', headers=auth_headers)
        assert response.status_code == 404
