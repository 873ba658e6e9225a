"""Status page route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ...app import IApplication

STATUS_PAGE = """<html>
  <head><title>GroupMe-Discord Bridge</title></head>
  <body>
    <h1>GroupMe-Discord Bridge is Running!</h1>
    <p>Features:</p>
    <ul>
      <li>Message bridging</li>
      <li>Image attachments</li>
      <li>Reaction notifications</li>
      <li>Reply context detection ({reply_status})</li>
    </ul>
    <p>Webhook endpoints:</p>
    <ul>
      <li>GroupMe webhook: <code>/groupme</code></li>
      <li>Discord webhook: <code>/discord</code></li>
    </ul>
    <p>Required environment variables:</p>
    <ul>
      <li><code>DISCORD_WEBHOOK_URL</code></li>
      <li><code>GROUPME_BOT_ID</code></li>
      <li><code>GROUPME_ACCESS_TOKEN</code> (required for reply context)</li>
    </ul>
    <p>Reply Context Detection:</p>
    <ul>
      <li>Official GroupMe reply attachments</li>
      <li>@mention pattern detection</li>
      <li>Quote format detection ("&gt; message")</li>
      <li>Name colon format detection</li>
    </ul>
  </body>
</html>
"""


def create_status_router(app: IApplication) -> APIRouter:
    """Create status router."""
    router = APIRouter(tags=["status"])

    @router.get("/", response_class=HTMLResponse)
    async def status_page() -> str:
        """Human-readable status page."""
        enabled = app.config.reply_context_enabled
        return STATUS_PAGE.format(reply_status="enabled" if enabled else "disabled")

    return router
