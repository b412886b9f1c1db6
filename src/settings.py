'''
Connection and console settings for the digital display inventory.

Values that are not typed at the login prompt come from DISPLAY_DB_*
environment variables (or a .env file) so a lab machine can change them
without touching the code.
'''

from pydantic_settings import BaseSettings, SettingsConfigDict

# --------- Constants ---------
CLEAR_KEYWORD = "clear"

OPTION_LIST = "1"
OPTION_SEARCH = "2"
OPTION_INSERT = "3"
OPTION_DELETE = "4"
OPTION_UPDATE = "5"
OPTION_LOGOUT = "6"

DISPLAY_COLUMNS = ["Serial Number", "Scheduler System", "Model Number"]
MODEL_COLUMNS = ["Model No", "Width", "Height", "Weight", "Depth", "Screen Size"]

SEPARATOR = "-----------------------"


class ConnectionSettings(BaseSettings):
    """Transport options applied to every database connection"""

    port: int = 3306              # Server port
    ssl_disabled: bool = True     # TLS off by default for lab servers
    connect_timeout: int = 10     # Seconds before giving up on the host
    init_schema: bool = False     # Create missing tables after login

    model_config = SettingsConfigDict(
        env_prefix="DISPLAY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def driver_options(self):
        """Keyword arguments passed straight to the driver's connect()"""
        return {
            'port': self.port,
            'ssl_disabled': self.ssl_disabled,
            'connection_timeout': self.connect_timeout,
        }
