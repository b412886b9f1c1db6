from pydantic import ValidationError

from database import Database, QueryError
from managing_system import ManagingSystem
from settings import (
    ConnectionSettings, OPTION_DELETE, OPTION_INSERT, OPTION_LIST,
    OPTION_LOGOUT, OPTION_SEARCH, OPTION_UPDATE,
)
from startup import Login


def close_connection(db):
    """Close the session connection; a failure is reported, never raised"""
    try:
        db.close()
        print("Disconnected from the database.")
    except Exception as e:
        print(f"Error closing the connection: {e}")


def run_menu(db, system):
    """Dispatch menu choices until the user logs out"""
    handlers = {
        OPTION_LIST: system.view_all_displays_with_details,  # Show displays, then model details
        OPTION_SEARCH: system.search_displays,               # Search displays by scheduler system
        OPTION_INSERT: system.insert_display,                # Insert a new display
        OPTION_DELETE: system.delete_display,                # Delete a display and its unused model
        OPTION_UPDATE: system.update_display,                # Update a display
    }

    while True:
        system.display_menu()
        try:
            choice = input("Choose an option: ").strip()
        except EOFError:
            choice = OPTION_LOGOUT  # End of input logs out

        if choice == OPTION_LOGOUT:
            print("Logging out...")
            return
        handler = handlers.get(choice)
        if handler is None:
            print("Invalid option. Please try again.")
            continue
        handler(db)


def main():
    """Main application entry point"""
    try:
        settings = ConnectionSettings()
    except ValidationError as e:
        print(f"[CONFIG] Invalid DISPLAY_DB_* setting:\n{e}")
        return

    conn = Login(settings).login()   # Blocks until a connection is open
    if conn is None:
        return  # Input ended before a connection was made
    db = Database(conn)
    system = ManagingSystem()

    try:
        if settings.init_schema:
            try:
                db.create_tables()
            except QueryError as e:
                print(f"Error creating tables: {e}")
        run_menu(db, system)
    finally:
        close_connection(db)


# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
