"""HTTP surface through the FastAPI TestClient, default in-memory backend."""

from fastapi.testclient import TestClient
import pytest


PNG_MAGIC = b'\x89PNG\r\n\x1a\n'


@pytest.mark.integration
class TestEventApi:
    def test_list_events(self, client: TestClient) -> None:
        response = client.get('/api/events')

        assert response.status_code == 200
        events = response.json()
        assert [e['id'] for e in events] == ['event_001', 'event_002', 'event_003', 'event_004']
        assert events[0]['total_seats'] == 30

    def test_get_event(self, client: TestClient) -> None:
        response = client.get('/api/events/event_002')

        assert response.status_code == 200
        assert response.json()['rows'] == 4

    def test_unknown_event_is_404(self, client: TestClient) -> None:
        response = client.get('/api/events/nope')

        assert response.status_code == 404
        assert response.json()['error'] == 'NotFoundError'


@pytest.mark.integration
class TestSeatApi:
    def test_grid_starts_empty(self, client: TestClient) -> None:
        response = client.get('/api/events/event_001/seats')

        assert response.status_code == 200
        grid = response.json()
        assert len(grid['seats']) == 30
        assert grid['seats'][7] == {
            'id': '1_1',
            'row': 1,
            'column': 1,
            'label': 'B2',
            'is_selected': False,
            'is_occupied': False,
        }
        assert grid['selection'] is None

    def test_select_two_seats(self, client: TestClient) -> None:
        client.post('/api/events/event_001/seats/0_0/select')
        response = client.post('/api/events/event_001/seats/1_1/select')

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'selected'
        selection = body['grid']['selection']
        assert selection['seat_labels'] == 'A1, B2'
        assert selection['code_payload'].startswith('Event:event_001|Seats:A1,B2|Time:')

    def test_occupied_seat_reports_status(self, client: TestClient) -> None:
        occupied = client.post('/api/events/event_001/seats/0_0/occupied')
        response = client.post('/api/events/event_001/seats/0_0/select')

        assert occupied.json()['status'] == 'occupied'
        assert response.status_code == 200
        assert response.json()['status'] == 'seat_occupied'

    def test_unknown_seat_reports_status(self, client: TestClient) -> None:
        response = client.post('/api/events/event_001/seats/99_99/select')

        assert response.status_code == 200
        assert response.json()['status'] == 'seat_not_found'

    def test_clear_selection(self, client: TestClient) -> None:
        client.post('/api/events/event_001/seats/0_0/select')

        response = client.delete('/api/events/event_001/selection')

        assert response.json()['status'] == 'cleared'
        assert response.json()['grid']['selected_count'] == 0

    def test_selection_qr(self, client: TestClient) -> None:
        assert client.get('/api/events/event_001/selection/qr').status_code == 409

        client.post('/api/events/event_001/seats/2_3/select')
        response = client.get('/api/events/event_001/selection/qr')

        assert response.status_code == 200
        assert response.headers['content-type'] == 'image/png'
        assert response.content.startswith(PNG_MAGIC)


@pytest.mark.integration
class TestBookingApi:
    def test_booking_without_selection_is_409(self, client: TestClient) -> None:
        response = client.post('/api/events/event_001/booking')

        assert response.status_code == 409
        assert response.json() == {'status': 'nothing_selected', 'ticket': None}

    def test_book_list_show_and_delete_ticket(self, client: TestClient) -> None:
        client.post('/api/events/event_002/seats/0_0/select')
        client.post('/api/events/event_002/seats/1_1/select')

        booked = client.post('/api/events/event_002/booking')

        assert booked.status_code == 201
        ticket = booked.json()['ticket']
        assert ticket['seat_labels'] == 'A1, B2'
        assert ticket['room'] == 'Room 205'

        listed = client.get('/api/tickets').json()
        assert [t['id'] for t in listed] == [ticket['id']]

        detail = client.get(f'/api/tickets/{ticket["id"]}')
        assert detail.json()['code_payload'].startswith('Event:event_002|Seats:A1,B2|Time:')

        qr = client.get(f'/api/tickets/{ticket["id"]}/qr')
        assert qr.status_code == 200
        assert qr.content.startswith(PNG_MAGIC)

        assert client.delete(f'/api/tickets/{ticket["id"]}').status_code == 204
        missing = client.delete(f'/api/tickets/{ticket["id"]}')
        assert missing.status_code == 404
        assert missing.json()['error'] == 'NotFoundError'
        assert client.get(f'/api/tickets/{ticket["id"]}').status_code == 404

        # Deleting the ticket leaves the selection in place
        grid = client.get('/api/events/event_002/seats').json()
        assert grid['selected_count'] == 2

    def test_tickets_listed_newest_event_first(self, client: TestClient) -> None:
        for event_id in ('event_001', 'event_003'):
            client.post(f'/api/events/{event_id}/seats/0_0/select')
            client.post(f'/api/events/{event_id}/booking')

        listed = client.get('/api/tickets').json()

        assert [t['event_id'] for t in listed] == ['event_003', 'event_001']


@pytest.mark.integration
def test_health(client: TestClient) -> None:
    response = client.get('/health')

    assert response.json() == {'status': 'healthy', 'storage_backend': 'memory'}
