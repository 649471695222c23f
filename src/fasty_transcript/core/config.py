"""
Configuration for the transcript fetcher.
All tunable values are centralized here and can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    footer: str = field(default_factory=lambda: os.getenv('DOCUMENT_FOOTER', 'Generated by FastyTranscript'))

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """HTTP timeout, size and retry configuration."""
    http_timeout: float = field(default_factory=lambda: float(os.getenv('HTTP_TIMEOUT', '20')))
    max_response_bytes: int = field(default_factory=lambda: int(os.getenv('HTTP_MAX_RESPONSE_BYTES', str(10 * 1024 * 1024))))
    retry_total: int = field(default_factory=lambda: int(os.getenv('HTTP_RETRY_TOTAL', '2')))
    retry_backoff: float = field(default_factory=lambda: float(os.getenv('HTTP_RETRY_BACKOFF', '0.5')))

# =============================================================================
# CLIENT IDENTITY CONFIGURATION
# =============================================================================

@dataclass
class ClientConfig:
    """Client identities presented to YouTube."""
    web_user_agent: str = field(default_factory=lambda: os.getenv(
        'WEB_USER_AGENT',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36'
    ))
    android_client_version: str = field(default_factory=lambda: os.getenv('ANDROID_CLIENT_VERSION', '19.09.37'))
    android_sdk_version: int = field(default_factory=lambda: int(os.getenv('ANDROID_SDK_VERSION', '31')))
    hl: str = field(default_factory=lambda: os.getenv('CLIENT_HL', 'en'))
    gl: str = field(default_factory=lambda: os.getenv('CLIENT_GL', 'US'))

    @property
    def android_user_agent(self) -> str:
        """User agent matching the ANDROID client version."""
        return f"com.google.android.youtube/{self.android_client_version} (Linux; U; Android 12; en_US) gzip"

# =============================================================================
# EXTERNAL TOOL CONFIGURATION
# =============================================================================

@dataclass
class ToolConfig:
    """External command-line tools used by the yt-dlp strategy."""
    ytdlp_path: str = field(default_factory=lambda: os.getenv('YTDLP_PATH', 'yt-dlp'))
    curl_path: str = field(default_factory=lambda: os.getenv('CURL_PATH', 'curl'))
    ytdlp_timeout: float = field(default_factory=lambda: float(os.getenv('YTDLP_TIMEOUT', '45')))
    curl_timeout: float = field(default_factory=lambda: float(os.getenv('CURL_TIMEOUT', '15')))
    max_output_bytes: int = field(default_factory=lambda: int(os.getenv('TOOL_MAX_OUTPUT_BYTES', str(10 * 1024 * 1024))))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Main configuration class that aggregates all configuration sections."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    client: ClientConfig = field(default_factory=ClientConfig)
    tools: ToolConfig = field(default_factory=ToolConfig)

    def validate(self) -> bool:
        """Validate numeric settings. Raises ValueError on the first bad value."""
        if self.network.http_timeout <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")
        if self.network.max_response_bytes <= 0:
            raise ValueError("HTTP_MAX_RESPONSE_BYTES must be positive")
        if self.network.retry_total < 0:
            raise ValueError("HTTP_RETRY_TOTAL must not be negative")
        if self.tools.ytdlp_timeout <= 0 or self.tools.curl_timeout <= 0:
            raise ValueError("YTDLP_TIMEOUT and CURL_TIMEOUT must be positive")
        if self.tools.max_output_bytes <= 0:
            raise ValueError("TOOL_MAX_OUTPUT_BYTES must be positive")
        return True

# Global configuration instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config

# =============================================================================
# ENVIRONMENT CONFIGURATION HELPERS
# =============================================================================

def create_env_template() -> str:
    """Create a template .env file with all available configuration options."""
    template = """# FastyTranscript Configuration
# Copy this file to .env and adjust as needed

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================
DOCUMENT_FOOTER=Generated by FastyTranscript

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================
LOG_LEVEL=INFO
LOG_FORMAT=%(asctime)s [%(name)s] %(levelname)s: %(message)s
LOG_DATE_FORMAT=%Y-%m-%d %H:%M:%S

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================
HTTP_TIMEOUT=20
HTTP_MAX_RESPONSE_BYTES=10485760
HTTP_RETRY_TOTAL=2
HTTP_RETRY_BACKOFF=0.5

# =============================================================================
# CLIENT IDENTITY
# =============================================================================
# WEB_USER_AGENT=Mozilla/5.0 ...
ANDROID_CLIENT_VERSION=19.09.37
ANDROID_SDK_VERSION=31
CLIENT_HL=en
CLIENT_GL=US

# =============================================================================
# EXTERNAL TOOLS
# =============================================================================
YTDLP_PATH=yt-dlp
CURL_PATH=curl
YTDLP_TIMEOUT=45
CURL_TIMEOUT=15
TOOL_MAX_OUTPUT_BYTES=10485760
"""
    return template
