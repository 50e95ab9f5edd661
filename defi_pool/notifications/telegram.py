"""Telegram notification service."""
import html
import logging
import ssl

import aiohttp
import certifi

from ..config import TelegramConfig
from ..models import TransactionOutcome

logger = logging.getLogger(__name__)


class TelegramNotifier:
    """Send transaction outcomes via Telegram bots.

    Successes go to the log bot silently; failures and rejections go to the
    alert bot with sound.
    """

    def __init__(self, config: TelegramConfig) -> None:
        self.alert_bot_token = config.alert_bot_token
        self.log_bot_token = config.log_bot_token
        self.chat_id = config.chat_id

    async def _send_message(
        self, message: str, bot_token: str, silent: bool = False
    ) -> bool:
        """Send Telegram message using specified bot."""
        if not bot_token or not self.chat_id:
            logger.warning("Telegram credentials not configured")
            return False

        url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
        payload = {
            "chat_id": self.chat_id,
            "text": message,
            "parse_mode": "HTML",
            "disable_notification": silent,
        }

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(url, json=payload) as response:
                if response.status == 200:
                    return True
                else:
                    logger.error(
                        "Failed to send Telegram message: %s", response.status
                    )
                    return False

    @staticmethod
    def format_outcome(outcome: TransactionOutcome) -> str:
        icon = "✅" if outcome.ok else "❌"
        lines = [f"{icon} {html.escape(outcome.message)}"]
        if outcome.explorer_url:
            lines.append(f'<a href="{html.escape(outcome.explorer_url)}">View on Explorer</a>')
        return "\n".join(lines)

    async def notify(self, outcome: TransactionOutcome) -> bool:
        message = self.format_outcome(outcome)
        if outcome.ok:
            sent = await self._send_message(message, self.log_bot_token, silent=True)
        else:
            sent = await self._send_message(message, self.alert_bot_token, silent=False)
        if sent:
            logger.info("Telegram %s notice sent", outcome.operation)
        return sent
