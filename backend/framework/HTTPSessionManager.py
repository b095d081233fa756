"""
Manager for pooled HTTP sessions used by JSON-RPC providers.
"""
import logging
import threading
from typing import Dict
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from django.conf import settings

logger = logging.getLogger(__name__)


class HTTPSessionManager:
    """
    Manager for HTTP sessions with connection pooling.
    One session per RPC endpoint, shared across cycles.
    """

    _sessions: Dict[str, requests.Session] = {}
    _lock = threading.Lock()

    @classmethod
    def getSession(cls, sessionKey: str = "default") -> requests.Session:
        """
        Get or create a session with connection pooling.

        Args:
            sessionKey: Unique key for this session (one per RPC endpoint)

        Returns:
            Configured requests.Session instance
        """
        with cls._lock:
            if sessionKey not in cls._sessions:
                cls._sessions[sessionKey] = cls._createSession()

            return cls._sessions[sessionKey]

    @classmethod
    def closeAll(cls) -> None:
        """Close every pooled session; the next getSession creates a fresh one."""
        with cls._lock:
            for session in cls._sessions.values():
                session.close()
            closed = len(cls._sessions)
            cls._sessions.clear()

        if closed:
            logger.info("WEB3_SERVICE :: Closed HTTP sessions | Count: %d", closed)

    @classmethod
    def _createSession(cls) -> requests.Session:
        """
        Create a new session with connection pooling.

        Only connection-level failures are retried here. Transfers are never
        retried within a cycle; the next cycle re-evaluates the account.
        """
        session = requests.Session()

        poolConnections = settings.RPC_POOL_CONNECTIONS
        poolMaxsize = settings.RPC_POOL_MAXSIZE

        adapter = HTTPAdapter(
            pool_connections=poolConnections,
            pool_maxsize=poolMaxsize,
            max_retries=Retry(
                total=None,
                connect=3,  # Only retry connection errors
                read=0,
                redirect=5,
                status=0,
                allowed_methods=False,
                raise_on_status=False
            )
        )

        session.mount('http://', adapter)
        session.mount('https://', adapter)

        logger.info(
            "WEB3_SERVICE :: Created HTTP session | Pool: %d connections | Max: %d",
            poolConnections,
            poolMaxsize
        )

        return session
