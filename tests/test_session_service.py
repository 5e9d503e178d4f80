from dscvit.core.config import settings
from dscvit.core.security import CookieCipher
from dscvit.services.session_service import get_session_id
from dscvit.utils.phonetic_key import CONSONANTS, VOWELS


def _set_cookie_headers(response):
    return response.headers.getlist("set-cookie")


def test_mints_identifier_without_cookie(make_jar):
    jar, response = make_jar()
    session_id = get_session_id(jar)

    assert len(session_id) == settings.session_id_length
    assert all(c in CONSONANTS + VOWELS for c in session_id)
    assert jar.get_private("session") == session_id
    assert jar.added == {"session": session_id}


def test_minted_cookie_attributes(make_jar, cipher):
    jar, response = make_jar()
    session_id = get_session_id(jar, domain=".dscv.it")

    headers = _set_cookie_headers(response)
    assert len(headers) == 1
    header = headers[0]
    lowered = header.lower()
    assert header.startswith("session=")
    assert "domain=.dscv.it" in lowered
    assert "samesite=lax" in lowered
    assert "secure" in lowered
    assert "httponly" in lowered
    assert "max-age=" in lowered

    sealed = header.split(";", 1)[0].split("=", 1)[1]
    assert session_id not in sealed
    assert cipher.unseal(sealed) == session_id


def test_existing_cookie_is_returned_unchanged(make_jar, cipher):
    jar, response = make_jar({"session": cipher.seal("kibosuvexa")})

    assert get_session_id(jar) == "kibosuvexa"
    assert jar.added == {}
    assert _set_cookie_headers(response) == []


def test_repeated_resolution_is_stable(make_jar):
    jar, response = make_jar()
    first = get_session_id(jar)
    second = get_session_id(jar)

    assert first == second
    assert len(_set_cookie_headers(response)) == 1


def test_tampered_cookie_is_replaced(make_jar, cipher):
    sealed = cipher.seal("kibosuvexa")
    jar, response = make_jar({"session": sealed[:-4] + "AAAA"})

    session_id = get_session_id(jar)
    assert session_id != "kibosuvexa"
    assert jar.get_private("session") == session_id
    assert len(_set_cookie_headers(response)) == 1


def test_cookie_from_rotated_key_is_replaced(make_jar):
    old = CookieCipher("old-secret").seal("kibosuvexa")
    jar, response = make_jar({"session": old})

    session_id = get_session_id(jar)
    assert session_id != "kibosuvexa"
    assert jar.added == {"session": session_id}


def test_plaintext_cookie_is_not_trusted(make_jar):
    jar, response = make_jar({"session": "kibosuvexa"})

    assert get_session_id(jar) != "kibosuvexa"


def test_other_cookies_are_left_alone(make_jar, cipher):
    jar, response = make_jar({"theme": "dark"})
    session_id = get_session_id(jar)

    assert jar.added == {"session": session_id}
    headers = _set_cookie_headers(response)
    assert len(headers) == 1
    assert headers[0].startswith("session=")


def test_empty_domain_gives_host_only_cookie(make_jar):
    jar, response = make_jar()
    get_session_id(jar, domain="")

    header = _set_cookie_headers(response)[0].lower()
    assert "domain=" not in header


def test_configured_domain_is_the_default(make_jar):
    jar, response = make_jar()
    get_session_id(jar)

    header = _set_cookie_headers(response)[0].lower()
    if settings.session_cookie_domain:
        assert f"domain={settings.session_cookie_domain}" in header
    else:
        assert "domain=" not in header
