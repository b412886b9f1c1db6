import pandas as pd

from database import QueryError
from display import DigitalDisplay, DisplayModel
from settings import DISPLAY_COLUMNS, MODEL_COLUMNS


def print_table(title, rows, columns):
    """Print fetched rows as a table under a title; an empty result prints only the header"""
    print(f"\n{title}:")
    df = pd.DataFrame(list(rows), columns=columns)
    if df.empty:
        print("  ".join(columns))
        return
    print(df.to_string(index=False))


class ManagingSystem:
    """Menu and query handlers for the display inventory"""

    def display_menu(self):
        """Display main system menu"""
        print("\nMain Menu:")
        print("1. Display all digital displays")
        print("2. Search digital displays by scheduler system")
        print("3. Insert a new digital display")
        print("4. Delete a digital display")
        print("5. Update a digital display")
        print("6. Logout")

    def view_all_displays(self, db):
        """Print every display row; return False if the query failed"""
        try:
            displays = db.fetch_all_displays()
        except QueryError as e:
            print(f"Error retrieving digital displays: {e}")
            return False
        print_table("Digital Displays", displays, DISPLAY_COLUMNS)
        return True

    def view_all_displays_with_details(self, db):
        """List displays, then optionally show one model's details"""
        if not self.view_all_displays(db):
            return

        model_no = input("Enter Model Number to view details or press Enter to return to the main menu: ").strip()
        if model_no:
            self.view_model_details(db, model_no)

    def view_all_models(self, db):
        """Print every model row"""
        try:
            models = db.fetch_all_models()
        except QueryError as e:
            print(f"Error retrieving model data: {e}")
            return
        print_table("Models", models, MODEL_COLUMNS)

    def view_model_details(self, db, model_no):
        """Print one model's dimensions; return True if it exists"""
        try:
            row = db.fetch_model(model_no)
        except QueryError as e:
            print(f"Error retrieving model details: {e}")
            return False

        if row is None:
            print("No model found with the specified model number.")
            return False

        print("\nModel Details:")
        DisplayModel.from_row(row).display()
        return True

    def search_displays(self, db):
        """Search displays by exact scheduler system"""
        scheduler_system = input("Enter Scheduler System to search: ").strip()
        try:
            displays = db.fetch_displays_by_scheduler(scheduler_system)
        except QueryError as e:
            print(f"Error searching data: {e}")
            return
        print_table("Search Results", displays, DISPLAY_COLUMNS)

    def insert_display(self, db):
        """Add a display, creating its model first when the model is new"""
        display = DigitalDisplay()
        display.input_full_info()

        try:
            # Check if the model exists in the Model table
            if db.fetch_model(display.model_no) is None:
                print("Model does not exist. Please provide model details:")
                model = DisplayModel(display.model_no)
                model.input_dimensions()
                db.insert_model(model.as_row())
                print("New model added successfully.")

            db.insert_display(*display.as_row())
        except QueryError as e:
            print(f"Error inserting data: {e}")
            return

        print("Digital display added successfully.")
        self.view_all_displays(db)

    def delete_display(self, db):
        """Delete a display, then its model if no other display uses it"""
        serial_no = input("Enter Serial Number to delete: ").strip()

        # Step 1: resolve the model the display points at
        try:
            model_no = db.fetch_display_model_no(serial_no)
        except QueryError as e:
            print(f"Error retrieving model information: {e}")
            return
        if model_no is None:
            print("Digital display not found.")
            return

        # Step 2: remove the display itself
        try:
            db.delete_display(serial_no)
        except QueryError as e:
            print(f"Error deleting digital display: {e}")
        else:
            print("Digital display deleted successfully.")
            self.view_all_displays(db)
            self.view_all_models(db)

        # Step 3: drop the model once nothing references it
        try:
            if db.count_displays_for_model(model_no) == 0:
                db.delete_model(model_no)
                print(f"Model {model_no} deleted successfully.")
        except QueryError as e:
            print(f"Error checking model usage: {e}")

    def update_display(self, db):
        """Change a display's scheduler system and model number"""
        display = DigitalDisplay()
        display.input_update_info()

        try:
            # Unlike insert, update never creates models
            if db.fetch_model(display.model_no) is None:
                print(f"Model {display.model_no} does not exist. Insert a display with this model first.")
                return

            updated = db.update_display(*display.as_row())
        except QueryError as e:
            print(f"Error updating data: {e}")
            return

        if updated == 0:
            print("Digital display not found.")
            return

        print("Digital display updated successfully.")
        self.view_all_displays(db)
