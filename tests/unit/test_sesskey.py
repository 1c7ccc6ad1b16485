from payreport.session.sesskey import SESSKEY_LENGTH, SessionKey, cancel_url


class TestSessionKey:
    def test_token_is_stable_per_session(self, session_key):
        assert session_key.token() == session_key.token()
        assert len(session_key.token()) == SESSKEY_LENGTH

    def test_token_differs_between_sessions(self):
        a = SessionKey("secret", "one")
        b = SessionKey("secret", "two")
        assert a.token() != b.token()

    def test_verify(self, session_key):
        assert session_key.verify(session_key.token())
        assert not session_key.verify("0000000000")
        assert not session_key.verify(None)
        assert not session_key.verify("")


class TestCancelUrl:
    def test_contains_id_and_key(self):
        assert cancel_url(42, "abc123") == "?cancel=42&sesskey=abc123"
