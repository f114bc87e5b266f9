from urllib.parse import quote

import pytest


def login(client, email, password="12345678", next_url=None):
    url = "/login/"
    if next_url is not None:
        url = f"/login/?next={quote(next_url, safe='')}"
    return client.post(url, data={"email": email, "password": password})


def test_home_ok(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Welcome" in res.data


def test_login_page_renders(client):
    res = client.get("/login/")
    assert res.status_code == 200
    assert b'name="email"' in res.data


def test_super_admin_redirects_to_admin_dashboard(client, seeded_db):
    res = login(client, "superadmin@test.com")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/admin/dashboard/")

    res = client.get("/admin/dashboard/")
    assert res.status_code == 200
    assert b"Super Admin Dashboard" in res.data


def test_church_admin_redirects_to_church_dashboard(client, seeded_db):
    res = login(client, "churchadmin@test.com")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/admin/church/dashboard/")

    res = client.get("/admin/church/dashboard/")
    assert res.status_code == 200
    assert b"Church Admin Dashboard" in res.data


def test_user_with_both_roles_goes_to_admin_dashboard(client, make_user):
    user = make_user("both@test.com", roles=["Church Admin", "Super Admin"])
    res = login(client, user["email"], user["password"])
    assert res.headers["Location"].endswith("/admin/dashboard/")


def test_user_without_roles_falls_back_but_is_forbidden(client, make_user):
    user = make_user("nobody@test.com")
    res = login(client, user["email"], user["password"])
    assert res.headers["Location"].endswith("/admin/dashboard/")

    res = client.get("/admin/dashboard/")
    assert res.status_code == 403


def test_invalid_password_redirects_to_login(client, seeded_db):
    res = login(client, "superadmin@test.com", "wrong")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/login/")

    res = client.get("/admin/dashboard/")
    assert res.status_code == 302
    assert "/login/" in res.headers["Location"]


def test_intended_url_wins_over_role(client, seeded_db):
    res = client.get("/admin/church/dashboard/")
    assert res.status_code == 302
    assert "/login/" in res.headers["Location"]

    # follow the guard's redirect so the login page captures `next`
    client.get(res.headers["Location"])
    res = login(client, "superadmin@test.com")
    assert res.headers["Location"].endswith("/admin/church/dashboard/")


def test_intended_url_from_next_param(client, seeded_db):
    res = login(client, "superadmin@test.com", next_url="/reports/weekly")
    assert res.headers["Location"].endswith("/reports/weekly")


def test_intended_url_is_used_once(client, seeded_db):
    login(client, "superadmin@test.com", next_url="/reports/weekly")
    client.get("/logout/")

    res = login(client, "superadmin@test.com")
    assert res.headers["Location"].endswith("/admin/dashboard/")


@pytest.mark.parametrize(
    "next_url", ["http://evil.example/phish", "//evil.example/phish", "javascript:alert(1)"]
)
def test_offsite_intended_url_is_ignored(client, seeded_db, next_url):
    res = login(client, "churchadmin@test.com", next_url=next_url)
    assert res.headers["Location"].endswith("/admin/church/dashboard/")


def test_logged_in_user_visiting_login_is_redirected(client, seeded_db):
    login(client, "churchadmin@test.com")
    res = client.get("/login/")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/admin/church/dashboard/")


def test_church_admin_cannot_open_super_admin_dashboard(client, seeded_db):
    login(client, "churchadmin@test.com")
    res = client.get("/admin/dashboard/")
    assert res.status_code == 403
    assert b"403 Forbidden" in res.data


def test_super_admin_cannot_open_church_dashboard(client, seeded_db):
    login(client, "superadmin@test.com")
    assert client.get("/admin/church/dashboard/").status_code == 403


def test_unverified_account_is_forbidden(client, make_user):
    user = make_user("new@test.com", roles=["Church Admin"], verified=False)
    login(client, user["email"], user["password"])
    assert client.get("/admin/church/dashboard/").status_code == 403


def test_logout(client, seeded_db):
    login(client, "superadmin@test.com")
    res = client.get("/logout/")
    assert res.headers["Location"].endswith("/login/")
    assert client.get("/admin/dashboard/").status_code == 302


def test_dashboard_shows_role_counts(client, seeded_db):
    login(client, "superadmin@test.com")
    res = client.get("/admin/dashboard/")
    assert b"Church Admin: 1" in res.data
    assert b"Super Admin: 1" in res.data


def test_account_without_password_cannot_log_in(client, app):
    from app.utils.database import db

    db.users.insert_one({"email": "nopass@test.com", "name": "nopass", "roles": ["Super Admin"]})

    res = login(client, "nopass@test.com", "anything")
    assert res.status_code == 302
    assert res.headers["Location"].endswith("/login/")
