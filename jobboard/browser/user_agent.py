import logging
from typing import Optional

from fake_useragent import UserAgent

from jobboard.config.settings import settings

logger = logging.getLogger(__name__)


class UserAgentProvider:
    """
    Supplies the identity announced to every page.
    Uses the configured fixed string unless random rotation is enabled.
    """

    _ua: Optional[UserAgent] = None
    _failed: bool = False

    @classmethod
    def initialize(cls):
        """
        Initialize the fake_useragent source if rotation is enabled and not done yet.
        """
        if not settings.RANDOM_USER_AGENT or cls._ua is not None or cls._failed:
            return
        try:
            cls._ua = UserAgent(
                browsers=["chrome", "firefox", "safari"],
                os=["windows", "macos"],
                fallback=settings.USER_AGENT,
            )
        except Exception as e:
            # Not retried: every later job uses the fixed identity
            cls._failed = True
            logger.warning(
                f"Failed to initialize fake_useragent, using {settings.USER_AGENT!r}: {e}"
            )

    @classmethod
    def get(cls) -> str:
        """
        Return the user-agent string for the next render job.
        """
        if settings.RANDOM_USER_AGENT:
            cls.initialize()
            if cls._ua:
                return cls._ua.random
        return settings.USER_AGENT
