from settings import SEPARATOR


def read_float(prompt):
    """Prompt until the user enters a valid number"""
    while True:
        raw = input(prompt).strip()
        try:
            return float(raw)
        except ValueError:
            print("Invalid number. Please enter a numeric value.")


class DisplayModel:
    """Hardware model record: physical dimensions shared by many displays"""

    def __init__(self, model_no="", width=0.0, height=0.0, weight=0.0, depth=0.0, screen_size=0.0):
        """Initialize model attributes"""
        self.model_no = model_no        # Unique model number
        self.width = width
        self.height = height
        self.weight = weight
        self.depth = depth
        self.screen_size = screen_size  # Diagonal

    @classmethod
    def from_row(cls, row):
        """Build a model from a (modelNo, width, height, weight, depth, screenSize) row"""
        model_no, *dimensions = row
        # NULL dimensions read as 0.0
        return cls(model_no, *(float(v) if v is not None else 0.0 for v in dimensions))

    def input_dimensions(self):
        """Collect the five numeric attributes from the user"""
        self.width = read_float("Enter Model Width: ")
        self.height = read_float("Enter Model Height: ")
        self.weight = read_float("Enter Model Weight: ")
        self.depth = read_float("Enter Model Depth: ")
        self.screen_size = read_float("Enter Model Screen Size: ")

    def as_row(self):
        """Return the model as a tuple in column order"""
        return (self.model_no, self.width, self.height, self.weight, self.depth, self.screen_size)

    def display(self):
        """Print formatted model details"""
        print(f"Model No: {self.model_no}")
        print(f"Width: {self.width}")
        print(f"Height: {self.height}")
        print(f"Weight: {self.weight}")
        print(f"Depth: {self.depth}")
        print(f"Screen Size: {self.screen_size}")
        print(SEPARATOR)


class DigitalDisplay:
    """Display device record keyed by serial number"""

    def __init__(self, serial_no="", scheduler_system="", model_no=""):
        self.serial_no = serial_no                # Unique serial number
        self.scheduler_system = scheduler_system  # Content-scheduling system driving the screen
        self.model_no = model_no                  # Reference to a DisplayModel

    def input_full_info(self):
        """Collect serial number, scheduler system and model number"""
        self.serial_no = input("Enter Serial Number: ").strip()
        self.scheduler_system = input("Enter Scheduler System: ").strip()
        self.model_no = input("Enter Model Number: ").strip()

    def input_update_info(self):
        """Collect the target serial number and its new field values"""
        self.serial_no = input("Enter Serial Number to update: ").strip()
        self.scheduler_system = input("Enter new Scheduler System: ").strip()
        self.model_no = input("Enter new Model Number: ").strip()

    def as_row(self):
        return (self.serial_no, self.scheduler_system, self.model_no)
