import sqlite3

# Parameter marker used by each supported driver
PLACEHOLDERS = {
    "mysql": "%s",
    "sqlite": "?",
}


class QueryError(Exception):
    """A statement failed on the server (constraint, syntax, lost connection)"""


def driver_errors(backend):
    """Exception classes raised by the driver behind a backend"""
    if backend == "sqlite":
        return (sqlite3.Error,)
    from mysql.connector import Error  # Only loaded once a MySQL connection exists
    return (Error,)


class Database:
    def __init__(self, conn, backend="mysql"):
        if backend not in PLACEHOLDERS:
            raise ValueError(f"Unsupported backend: {backend}")
        self.conn = conn
        self.backend = backend
        self.p = PLACEHOLDERS[backend]
        self.errors = driver_errors(backend)

    def create_tables(self):
        create_model_table = """
        CREATE TABLE IF NOT EXISTS Model (
            modelNo VARCHAR(64) PRIMARY KEY,
            width REAL,
            height REAL,
            weight REAL,
            depth REAL,
            screenSize REAL
        )
        """
        self.execute_query(create_model_table)

        create_display_table = """
        CREATE TABLE IF NOT EXISTS DigitalDisplay (
            serialNo VARCHAR(64) PRIMARY KEY,
            schedulerSystem VARCHAR(255),
            modelNo VARCHAR(64),
            FOREIGN KEY (modelNo) REFERENCES Model(modelNo)
        )
        """
        self.execute_query(create_display_table)

    def execute_query(self, query, params=None):
        """Run a write statement, commit it and return the affected row count"""
        cursor = None
        try:
            cursor = self.conn.cursor()
            if params is not None:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            self.conn.commit()
            return cursor.rowcount
        except self.errors as e:
            print(f"[DB] Query error: {e}\nSQL: {query.strip()}\nParams: {params}")
            raise QueryError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def fetch(self, query, params=None):
        """Run a read statement and return all rows"""
        cursor = None
        try:
            cursor = self.conn.cursor()
            if params is not None:
                cursor.execute(query, params)
            else:
                cursor.execute(query)
            return cursor.fetchall()
        except self.errors as e:
            print(f"[DB] Query error: {e}\nSQL: {query.strip()}\nParams: {params}")
            raise QueryError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    # ——— Displays ———
    def fetch_all_displays(self):
        return self.fetch("SELECT serialNo, schedulerSystem, modelNo FROM DigitalDisplay")

    def fetch_displays_by_scheduler(self, scheduler_system):
        q = f"SELECT serialNo, schedulerSystem, modelNo FROM DigitalDisplay WHERE schedulerSystem = {self.p}"
        return self.fetch(q, (scheduler_system,))

    def fetch_display_model_no(self, serial_no):
        """Model number referenced by a display, or None if the serial is unknown"""
        rows = self.fetch(f"SELECT modelNo FROM DigitalDisplay WHERE serialNo = {self.p}", (serial_no,))
        return rows[0][0] if rows else None

    def insert_display(self, serial_no, scheduler_system, model_no):
        q = f"INSERT INTO DigitalDisplay (serialNo, schedulerSystem, modelNo) VALUES ({self.p}, {self.p}, {self.p})"
        return self.execute_query(q, (serial_no, scheduler_system, model_no))

    def update_display(self, serial_no, scheduler_system, model_no):
        q = f"UPDATE DigitalDisplay SET schedulerSystem = {self.p}, modelNo = {self.p} WHERE serialNo = {self.p}"
        return self.execute_query(q, (scheduler_system, model_no, serial_no))

    def delete_display(self, serial_no):
        return self.execute_query(f"DELETE FROM DigitalDisplay WHERE serialNo = {self.p}", (serial_no,))

    def count_displays_for_model(self, model_no):
        rows = self.fetch(f"SELECT COUNT(*) FROM DigitalDisplay WHERE modelNo = {self.p}", (model_no,))
        return rows[0][0] if rows else 0

    # ——— Models ———
    def fetch_all_models(self):
        return self.fetch("SELECT modelNo, width, height, weight, depth, screenSize FROM Model")

    def fetch_model(self, model_no):
        q = f"SELECT modelNo, width, height, weight, depth, screenSize FROM Model WHERE modelNo = {self.p}"
        rows = self.fetch(q, (model_no,))
        return rows[0] if rows else None

    def insert_model(self, model_tuple):
        """
        model_tuple: (modelNo, width, height, weight, depth, screenSize)
        """
        q = f"""
        INSERT INTO Model
        (modelNo, width, height, weight, depth, screenSize)
        VALUES ({', '.join([self.p] * 6)})
        """
        return self.execute_query(q, tuple(model_tuple))

    def delete_model(self, model_no):
        return self.execute_query(f"DELETE FROM Model WHERE modelNo = {self.p}", (model_no,))

    def close(self):
        self.conn.close()
