"""
Tests for the HTTP routes, with the database dependency swapped for an
in-memory MongoDB.
"""
import unittest
from unittest.mock import MagicMock

import mongomock
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from config import TEST_PRODUCT_ID
from database import get_db, serialize_doc
from main import app
from schemas import PRODUCTS, USERS

REGISTRATION = {
    'firstName': 'Test',
    'lastName': 'User',
    'email': 'test@example.com',
    'password': 'password123',
    'phoneNumber': '555-123-4567',
    'imageUrl': 'https://i.pravatar.cc/150?u=test',
}


class RouteTestCase(unittest.TestCase):
    def setUp(self):
        self.db = mongomock.MongoClient()['inventory_test']
        app.dependency_overrides[get_db] = lambda: self.db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def use_failing_db(self):
        failing = MagicMock()
        failing.__getitem__.return_value.find_one.side_effect = PyMongoError('connection reset')
        failing.__getitem__.return_value.insert_one.side_effect = PyMongoError('connection reset')
        app.dependency_overrides[get_db] = lambda: failing


class TestLogin(RouteTestCase):

    def test_valid_credentials_return_user(self):
        user_id = self.db[USERS].insert_one(dict(REGISTRATION)).inserted_id
        stored = serialize_doc(self.db[USERS].find_one({'_id': user_id}))

        res = self.client.post('/login', json={'email': 'test@example.com', 'password': 'password123'})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), stored)
        self.assertEqual(res.json()['id'], str(user_id))

    def test_wrong_password(self):
        self.db[USERS].insert_one(dict(REGISTRATION))

        res = self.client.post('/login', json={'email': 'test@example.com', 'password': 'nope'})

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.text, 'Invalid Credentials')
        self.assertTrue(res.headers['content-type'].startswith('text/plain'))

    def test_unknown_user(self):
        res = self.client.post('/login', json={'email': 'ghost@example.com', 'password': 'password123'})
        self.assertEqual(res.status_code, 401)

    def test_non_email_login_is_plain_mismatch(self):
        res = self.client.post('/login', json={'email': 'admin', 'password': 'x'})
        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.text, 'Invalid Credentials')

    def test_email_matched_exactly_as_stored(self):
        self.db[USERS].insert_one({'email': 'Bob@Example.COM', 'password': 'pw'})

        res = self.client.post('/login', json={'email': 'Bob@Example.COM', 'password': 'pw'})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()['email'], 'Bob@Example.COM')

        res = self.client.post('/login', json={'email': 'bob@example.com', 'password': 'pw'})
        self.assertEqual(res.status_code, 401)

    def test_api_prefix(self):
        self.db[USERS].insert_one(dict(REGISTRATION))
        res = self.client.post('/api/login', json={'email': 'test@example.com', 'password': 'password123'})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()['email'], 'test@example.com')

    def test_lookup_error_is_500(self):
        self.use_failing_db()
        res = self.client.post('/login', json={'email': 'test@example.com', 'password': 'password123'})
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {'detail': 'connection reset'})


class TestRegister(RouteTestCase):

    def test_register_returns_persisted_user(self):
        res = self.client.post('/register', json=REGISTRATION)

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body, dict(REGISTRATION, id=body['id']))
        stored = self.db[USERS].find_one({'_id': ObjectId(body['id'])})
        self.assertEqual(stored['email'], 'test@example.com')

    def test_registered_user_can_log_in(self):
        self.client.post('/register', json=REGISTRATION)
        res = self.client.post('/login', json={'email': 'test@example.com', 'password': 'password123'})
        self.assertEqual(res.status_code, 200)

    def test_optional_fields_default_to_none(self):
        payload = {k: REGISTRATION[k] for k in ('firstName', 'lastName', 'email', 'password')}
        res = self.client.post('/register', json=payload)
        self.assertEqual(res.status_code, 200)
        self.assertIsNone(res.json()['phoneNumber'])

    def test_invalid_email_rejected(self):
        res = self.client.post('/register', json=dict(REGISTRATION, email='not-an-email'))
        self.assertEqual(res.status_code, 422)
        self.assertEqual(self.db[USERS].count_documents({}), 0)

    def test_save_error_is_500(self):
        self.use_failing_db()
        res = self.client.post('/register', json=REGISTRATION)
        self.assertEqual(res.status_code, 500)
        self.assertIn('detail', res.json())


class TestProductLookup(RouteTestCase):

    def test_absent_product_returns_null(self):
        res = self.client.get('/testget')
        self.assertEqual(res.status_code, 200)
        self.assertIsNone(res.json())

    def test_found_product(self):
        owner = ObjectId()
        self.db[PRODUCTS].insert_one({
            '_id': ObjectId(TEST_PRODUCT_ID),
            'userID': owner,
            'name': 'Mock Product',
            'manufacturer': 'AlphaTech',
            'stock': 4,
            'description': 'Compact and powerful.',
        })

        res = self.client.get('/testget')

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {
            'id': TEST_PRODUCT_ID,
            'userID': str(owner),
            'name': 'Mock Product',
            'manufacturer': 'AlphaTech',
            'stock': 4,
            'description': 'Compact and powerful.',
        })

    def test_lookup_error_is_500(self):
        self.use_failing_db()
        res = self.client.get('/api/testget')
        self.assertEqual(res.status_code, 500)


class TestRouteSurface(RouteTestCase):

    def test_only_inventory_routes_are_served(self):
        self.assertEqual(self.client.get('/').status_code, 404)
        self.assertEqual(self.client.get('/test').status_code, 404)


if __name__ == '__main__':
    unittest.main()
