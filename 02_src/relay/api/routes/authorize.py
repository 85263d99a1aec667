"""Account linking page."""

from html import escape

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

# Issued to every user; a real deployment generates one per login
AUTHORIZATION_CODE = "1234567890"

PAGE = """<!DOCTYPE html>
<html>
  <head><title>Link your account</title></head>
  <body>
    <h1>Link your account</h1>
    <p>Account linking token: {token}</p>
    <p>Redirect URI: {redirect_uri}</p>
    <a href="{success_uri}">Complete account link</a>
  </body>
</html>
"""


def create_authorize_router() -> APIRouter:
    """Create account-linking router."""
    router = APIRouter(tags=["account-linking"])

    @router.get("/authorize", response_class=HTMLResponse)
    async def authorize(
        account_linking_token: str = Query(""),
        redirect_uri: str = Query(""),
    ) -> str:
        """Render the login page the account_link button points at."""
        success_uri = f"{redirect_uri}&authorization_code={AUTHORIZATION_CODE}"
        return PAGE.format(
            token=escape(account_linking_token),
            redirect_uri=escape(redirect_uri),
            success_uri=escape(success_uri, quote=True),
        )

    return router
