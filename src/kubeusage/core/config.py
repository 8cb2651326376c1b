# src/kubeusage/core/config.py

import logging
import os

from dotenv import load_dotenv

from kubeusage import __version__

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


def _default_kubeconfig() -> str:
    """Mirrors kubectl: $KUBECONFIG first, then ~/.kube/config when a home directory exists."""
    env_path = os.getenv("KUBECONFIG")
    if env_path:
        return env_path
    home = os.path.expanduser("~")
    if home and home != "~":
        return os.path.join(home, ".kube", "config")
    return ""


def _env_bool(key: str, default: str = "True") -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # -- Prometheus variables ---
        self.PROMETHEUS_BEARER_TOKEN = self._get_secret("PROMETHEUS_BEARER_TOKEN")
        self.PROMETHEUS_USERNAME = self._get_secret("PROMETHEUS_USERNAME")
        self.PROMETHEUS_PASSWORD = self._get_secret("PROMETHEUS_PASSWORD")

        # --- Kubernetes variables ---
        # Resolved per instance so a changed $KUBECONFIG is honoured by new Config objects.
        self.KUBECONFIG = _default_kubeconfig()
        self.KUBE_CONTEXT = os.getenv("KUBE_CONTEXT") or None

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (mounted secret volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = f"/etc/kubeusage/secrets/{key}"
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # -- Prometheus variables ---
    PROMETHEUS_URL = os.getenv("PROMETHEUS_URL", "http://127.0.0.1:9090/")
    PROMETHEUS_VERIFY_CERTS = _env_bool("PROMETHEUS_VERIFY_CERTS")

    # --- HTTP client variables ---
    DEFAULT_TIMEOUT_CONNECT = float(os.getenv("DEFAULT_TIMEOUT_CONNECT", "5"))
    DEFAULT_TIMEOUT_READ = float(os.getenv("DEFAULT_TIMEOUT_READ", "30"))
    USER_AGENT = os.getenv("USER_AGENT", f"kubeusage/{__version__}")

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL.")
        if not self.PROMETHEUS_URL.startswith(("http://", "https://")):
            raise ValueError("PROMETHEUS_URL must start with 'http://' or 'https://'.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
