import unittest
from unittest.mock import patch

from taskapi import create_app
from taskapi.services import MemorySessionStore


class MemorySessionStoreTestCase(unittest.TestCase):
    def test_set_get_destroy(self):
        store = MemorySessionStore()
        store.set("token", "a@b.com")
        self.assertEqual(store.get("token"), "a@b.com")
        store.destroy("token")
        self.assertIsNone(store.get("token"))
        store.destroy("token")

    def test_unknown_token(self):
        self.assertIsNone(MemorySessionStore().get("nothing"))

    @patch("taskapi.services.session_store.time")
    def test_entries_expire(self, mock_time):
        mock_time.monotonic.return_value = 100.0
        store = MemorySessionStore(ttl=10)
        store.set("token", "a@b.com")

        mock_time.monotonic.return_value = 109.0
        self.assertEqual(store.get("token"), "a@b.com")

        mock_time.monotonic.return_value = 111.0
        self.assertIsNone(store.get("token"))
        self.assertEqual(len(store), 0)


class SessionCookieTestCase(unittest.TestCase):
    def setUp(self):
        self.sessions = MemorySessionStore()
        self.app = create_app(
            {"TESTING": True, "SECRET_KEY": "test-secret"},
            session_store=self.sessions,
        )
        self.client = self.app.test_client()

    def login(self):
        return self.client.post('/auth/cookie/login', json={"email": "a@b.com", "password": "m294"})

    def test_cookie_attributes(self):
        response = self.login()
        header = response.headers["Set-Cookie"]
        self.assertTrue(header.startswith("m294-session="))
        self.assertIn("HttpOnly", header)
        self.assertNotIn("Secure", header)
        self.assertNotIn("a@b.com", header)

    def test_no_cookie_for_untouched_session(self):
        response = self.client.get('/tasks')
        self.assertNotIn("Set-Cookie", response.headers)

    def test_failed_login_sets_no_cookie(self):
        response = self.client.post('/auth/cookie/login', json={"email": "a@b.com", "password": "nope"})
        self.assertNotIn("Set-Cookie", response.headers)
        self.assertEqual(len(self.sessions), 0)

    def test_tampered_cookie_is_ignored(self):
        self.login()
        cookie = self.client.get_cookie("m294-session")
        self.client.set_cookie("m294-session", cookie.value + "x")
        self.assertEqual(self.client.get('/auth/cookie/status').status_code, 401)

    def test_forged_cookie_is_ignored(self):
        self.client.set_cookie("m294-session", "made-up-token")
        self.assertEqual(self.client.get('/auth/cookie/status').status_code, 401)

    def test_session_lost_when_store_forgets_it(self):
        self.login()
        token = next(iter(self.sessions._entries))
        self.sessions.destroy(token)
        self.assertEqual(self.client.get('/auth/cookie/status').status_code, 401)

    def test_relogin_reuses_token(self):
        self.login()
        first = self.client.get_cookie("m294-session").value
        self.client.post('/auth/cookie/login', json={"email": "c@d.com", "password": "m294"})
        self.assertEqual(self.client.get_cookie("m294-session").value, first)
        self.assertEqual(len(self.sessions), 1)
        self.assertEqual(self.client.get('/auth/cookie/status').get_json(), {"email": "c@d.com"})

    def test_logout_expires_cookie(self):
        self.login()
        self.client.post('/auth/cookie/logout')
        self.assertIsNone(self.client.get_cookie("m294-session"))

    def test_custom_cookie_name(self):
        app = create_app({"TESTING": True, "SECRET_KEY": "s", "SESSION_COOKIE_NAME": "tasks-sid"})
        client = app.test_client()
        client.post('/auth/cookie/login', json={"email": "a@b.com", "password": "m294"})
        self.assertIsNotNone(client.get_cookie("tasks-sid"))
        self.assertEqual(client.get('/auth/cookie/status').status_code, 200)


if __name__ == '__main__':
    unittest.main()
