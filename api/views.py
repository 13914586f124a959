"""
HTML pages.

Plain markup; every user-supplied value goes through escape().
"""

from html import escape
from typing import Optional

from fastapi.responses import HTMLResponse

from modules.users.models import User
from shared.models import SessionUser


def render_page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    html = (
        "<!DOCTYPE html>\n"
        "<html><head><meta charset=\"utf-8\">"
        f"<title>{escape(title)}</title></head>\n"
        f"<body>\n{body}\n</body></html>\n"
    )
    return HTMLResponse(html, status_code=status_code)


def message_page(
    message: str,
    status_code: int = 200,
    link_href: Optional[str] = None,
    link_text: str = "Try again",
) -> HTMLResponse:
    """A one-line message with an optional link, used for all error pages."""
    body = f"<p>{escape(message)}</p>"
    if link_href:
        body += f'\n<a href="{escape(link_href)}">{escape(link_text)}</a>'
    return render_page("Turnstile", body, status_code=status_code)


def index_page(user: Optional[SessionUser]) -> HTMLResponse:
    if user is None:
        body = (
            "<h1>Welcome</h1>\n"
            '<a href="/signup">Sign up</a>\n'
            '<a href="/login">Log in</a>'
        )
    else:
        body = (
            f"<h1>Hello, {escape(user.name)}!</h1>\n"
            '<a href="/members">Members area</a>\n'
        )
        if user.is_admin:
            body += '<a href="/admin">Admin</a>\n'
        body += '<a href="/logout">Log out</a>'
    return render_page("Turnstile", body)


def signup_page() -> HTMLResponse:
    body = (
        "<h1>Sign up</h1>\n"
        '<form method="post" action="/signupSubmit">\n'
        '  <input name="name" placeholder="name" maxlength="30">\n'
        '  <input name="email" type="email" placeholder="email">\n'
        '  <input name="password" type="password" placeholder="password">\n'
        "  <button>Submit</button>\n"
        "</form>"
    )
    return render_page("Sign up", body)


def login_page() -> HTMLResponse:
    body = (
        "<h1>Log in</h1>\n"
        '<form method="post" action="/loginSubmit">\n'
        '  <input name="email" type="email" placeholder="email">\n'
        '  <input name="password" type="password" placeholder="password">\n'
        "  <button>Submit</button>\n"
        "</form>"
    )
    return render_page("Log in", body)


def members_page(user: SessionUser, image: str) -> HTMLResponse:
    body = (
        f"<h1>Hello, {escape(user.name)}.</h1>\n"
        f'<img src="/{escape(image)}" alt="{escape(image)}">\n'
        '<a href="/logout">Sign out</a>'
    )
    return render_page("Members", body)


def admin_page(users: list[User], current_user: SessionUser) -> HTMLResponse:
    rows = []
    for user in users:
        action = "demote" if user.is_admin else "promote"
        rows.append(
            "<tr>"
            f"<td>{escape(user.name)}</td>"
            f"<td>{escape(user.email)}</td>"
            f"<td>{escape(user.role.value)}</td>"
            "<td>"
            f'<form method="post" action="/admin/{action}">'
            f'<input type="hidden" name="userId" value="{escape(user.id)}">'
            f"<button>{action.capitalize()}</button>"
            "</form>"
            "</td>"
            "</tr>"
        )
    body = (
        f"<h1>Admin</h1>\n<p>Signed in as {escape(current_user.email)}</p>\n"
        "<table>\n<tr><th>Name</th><th>Email</th><th>Role</th><th></th></tr>\n"
        + "\n".join(rows)
        + "\n</table>\n"
        '<a href="/">Home</a>'
    )
    return render_page("Admin", body)
