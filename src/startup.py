from getpass import getpass

from connector import connect
from settings import CLEAR_KEYWORD, ConnectionSettings


class Login:
    """Collect connection parameters until a database connection is opened."""

    def __init__(self, settings=None):
        """Start with no parameters collected."""
        self.settings = settings if settings is not None else ConnectionSettings()
        self.clear_parameters(announce=False)

    def clear_parameters(self, announce=True):
        """Forget every collected parameter."""
        self.host = None
        self.db_name = None
        self.username = None
        self.password = None
        if announce:
            print("All parameters have been cleared. Please re-enter your login details.")

    def _is_clear(self, value):
        return value.lower() == CLEAR_KEYWORD

    def collect_parameters(self):
        """Prompt for the four parameters; return False if 'clear' was entered."""
        self.host = input("Enter host (or type 'clear' to reset all parameters): ").strip()
        if self._is_clear(self.host):
            self.clear_parameters()
            return False

        self.db_name = input("Enter database name (or type 'clear' to reset all parameters): ").strip()
        if self._is_clear(self.db_name):
            self.clear_parameters()
            return False

        self.username = input("Enter username (or type 'clear' to reset all parameters): ").strip()
        if self._is_clear(self.username):
            self.clear_parameters()
            return False

        # Password is read without echo and never stripped
        self.password = getpass("Enter password (or type 'clear' to reset all parameters): ")
        if self._is_clear(self.password):
            self.clear_parameters()
            return False

        return True

    def login(self):
        """Loop until a connection succeeds and return it; None if input ends."""
        while True:
            print("Welcome! Please login to the database.")
            try:
                collected = self.collect_parameters()
            except EOFError:
                print("\nLogin cancelled.")
                return None
            if not collected:
                continue  # Restart the field sequence

            conn = connect(self.host, self.db_name, self.username, self.password, self.settings)
            if conn is not None:
                return conn

            print("Failed to connect. Type 'clear' to reset parameters or try again.")
