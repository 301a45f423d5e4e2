"""Route-level tests through the Flask test client."""

from flighttrack.services import FlightService
from tests.sample_data import StubDataStore

IN_BOX = {'bottomLeftX': '-120', 'bottomLeftY': '30', 'topRightX': '-70', 'topRightY': '45'}


def make_failing_client():
    from flighttrack.app import create_app
    app = create_app(flight_service=FlightService(StubDataStore(fail=True)))
    return app.test_client()


class TestHealth:

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        body = response.get_json()
        assert body['status'] == 'healthy'
        assert body['uptime'] >= 0
        assert 'timestamp' in body

    def test_unknown_route(self, client):
        response = client.get('/nowhere')
        assert response.status_code == 404
        assert response.get_json() == {'error': 'Not found'}


class TestListing:

    def test_list_flights(self, client):
        response = client.get('/flights')
        assert response.status_code == 200
        body = response.get_json()
        assert body['message'] == 'Successfully fetched all flights'
        assert len(body['data']) == 2

    def test_list_flights_store_down(self):
        response = make_failing_client().get('/flights')
        assert response.status_code == 500
        assert 'failed with status 503' in response.get_json()['message']

    def test_list_airports(self, client):
        response = client.get('/flights/airports')
        assert response.status_code == 200
        assert [a['iata'] for a in response.get_json()['data']] == ['JFK', 'LAX', 'SFO']

    def test_list_airports_store_down(self):
        response = make_failing_client().get('/flights/airports')
        assert response.status_code == 500

    def test_cors_header(self, client):
        response = client.get('/flights', headers={'Origin': 'http://example.com'})
        assert response.headers.get('Access-Control-Allow-Origin') == '*'


class TestDetails:

    def test_details(self, client):
        response = client.get('/flights/1/details')
        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'departureAerodrome': 'JFK',
            'departureTime': '2024-01-01T10:00:00Z',
            'arrivalAerodrome': 'LAX',
            'arrivalTime': '2024-01-01T12:00:00Z',
        }

    def test_details_missing(self, client):
        response = client.get('/flights/999/details')
        assert response.status_code == 400
        assert 'error' in response.get_json()


class TestCreate:

    def test_create(self, client, store):
        body = {
            'departureAerodrome': 'LAX',
            'departureTime': '2024-01-01T13:00:00Z',
            'arrivalAerodrome': 'SFO',
            'arrivalTime': '2024-01-01T14:30:00Z',
        }
        response = client.post('/flights', json=body)
        assert response.status_code == 201
        created = response.get_json()['data']
        assert created['id'] == '3'
        assert store.flights['3']['arrivalAerodrome'] == 'SFO'

    def test_create_invalid(self, client, store):
        response = client.post('/flights', json={'arrivalAerodrome': 'LAX', 'arrivalTime': 'invalid-date'})
        assert response.status_code == 400
        body = response.get_json()
        assert body['message'] == 'Validation failed'
        assert 'arrivalTime must be a valid ISO 8601 date string' in body['errors']
        assert not any(call[0] == 'POST' for call in store.calls)

    def test_create_without_body(self, client):
        response = client.post('/flights', data='not json', content_type='text/plain')
        assert response.status_code == 400
        assert response.get_json()['errors'] == ['Request body must be a JSON object']


class TestPosition:

    def test_before_departure(self, client):
        response = client.get('/flights/1/position', query_string={'time': '2024-01-01T09:00:00Z'})
        assert response.status_code == 200
        body = response.get_json()
        assert body['message'] == 'Flight position fetched successfully'
        assert body['data'] == {'longitude': -73.7781, 'latitude': 40.6413}

    def test_defaults_to_now(self, client):
        # The fixed clock sits after arrival
        response = client.get('/flights/1/position')
        assert response.get_json()['data'] == {'longitude': -118.4081, 'latitude': 33.9425}

    def test_midflight(self, client):
        response = client.get('/flights/1/position', query_string={'time': '2024-01-01T11:00:00Z'})
        data = response.get_json()['data']
        assert -118.4081 < data['longitude'] < -73.7781
        assert 33.9425 < data['latitude'] < 40.6413

    def test_invalid_time(self, client):
        response = client.get('/flights/1/position', query_string={'time': 'soon'})
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Validation failed'

    def test_unknown_aerodrome(self, client):
        response = client.get('/flights/2/position', query_string={'time': '2024-01-01T11:00:00Z'})
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Aerodrome XXX not found'}


class TestInAirspace:

    def test_inside(self, client):
        query = dict(IN_BOX, time='2024-01-01T11:00:00Z')
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.status_code == 200
        body = response.get_json()
        assert body['message'] == 'Airspace information fetched successfully'
        assert body['data'] == {'isInAirspace': True}

    def test_outside(self, client):
        query = {'bottomLeftX': '-10', 'bottomLeftY': '-10', 'topRightX': '10', 'topRightY': '10'}
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.get_json()['data'] == {'isInAirspace': False}

    def test_missing_coordinates(self, client):
        query = dict(IN_BOX)
        del query['topRightY']
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Airspace coordinates are required'}

    def test_non_numeric_coordinates(self, client):
        query = dict(IN_BOX, bottomLeftX='west')
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Airspace coordinates must be numeric'}

    def test_non_finite_coordinates(self, client):
        for bad in ('nan', 'inf', '-Infinity'):
            query = dict(IN_BOX, topRightX=bad)
            response = client.get('/flights/1/in-airspace', query_string=query)
            assert response.status_code == 400
            assert response.get_json() == {'error': 'Airspace coordinates must be finite'}

    def test_invalid_range(self, client):
        query = {'bottomLeftX': '170', 'bottomLeftY': '-10', 'topRightX': '-170', 'topRightY': '10'}
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.status_code == 400
        assert response.get_json() == {'error': 'Invalid airspace longitude range'}

    def test_invalid_time(self, client):
        query = dict(IN_BOX, time='not-a-time')
        response = client.get('/flights/1/in-airspace', query_string=query)
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Validation failed'
