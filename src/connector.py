from settings import ConnectionSettings


def connect(host, db_name, username, password, settings=None):
    """Open one connection to the display database, or return None on failure"""
    if settings is None:
        settings = ConnectionSettings()

    try:
        import mysql.connector  # Driver is loaded on first login
        from mysql.connector.constants import ClientFlag
    except ImportError:
        print("Database driver not found. Ensure mysql-connector-python is installed.")
        return None

    print(f"[DB] Connecting to: {host}/{db_name}")
    try:
        conn = mysql.connector.connect(
            host=host,
            database=db_name,
            user=username,
            password=password,
            client_flags=[ClientFlag.FOUND_ROWS],  # UPDATE reports matched rows, not changed rows
            **settings.driver_options()
        )
    except mysql.connector.Error as e:
        # Authentication failure, unknown database or unreachable host
        print(f"Connection failed: {e}")
        return None

    print("Connected to the database successfully!")
    return conn
