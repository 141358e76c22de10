# File: src/parksim/presentation/console.py
"""
Console front end for the Parking Simulator

A thin text-menu loop: it reads and validates raw input, calls the
application service and prints the results. Input and output callables are
injectable so the loop can be driven from tests.
"""

from typing import Callable, Dict, Optional
import logging

from ..application.parking_service import ParkingService, ParkingServiceError
from ..application.dtos import MAX_PLATE_LENGTH
from ..domain.models import format_timestamp
from ..infrastructure.factories import VehicleFactory


MENU_ITEMS = (
    "Register vehicle entry",
    "Register vehicle exit",
    "Check parking availability",
    "List parked vehicles",
    "Generate daily report",
    "Clear daily report (simulate new day)",
    "Advance simulation time",
    "Quit",
)


class ParkingConsoleApp:
    """Menu-driven console controller"""

    def __init__(
        self,
        service: ParkingService,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self.service = service
        self._input = input_func
        self._output = output_func
        self.logger = logging.getLogger(self.__class__.__name__)

        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.handle_vehicle_entry,
            2: self.handle_vehicle_exit,
            3: self.show_availability,
            4: self.list_parked_vehicles,
            5: self.show_daily_report,
            6: self.clear_daily_report,
            7: self.advance_time,
        }

    # ========================================================================
    # INPUT HELPERS
    # ========================================================================

    def say(self, text: str = "") -> None:
        self._output(text)

    def read_int(self, prompt: str) -> int:
        """Prompt until a non-negative integer is entered"""
        while True:
            raw = self._input(prompt)
            try:
                value = int(raw)
            except ValueError:
                self.say("Invalid input, please enter a whole number.")
                continue
            if value < 0:
                self.say("Please enter a non-negative whole number.")
                continue
            return value

    def read_non_empty(self, prompt: str) -> str:
        """Prompt until a non-blank string is entered; returns it trimmed"""
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self.say("Input cannot be empty, please try again.")

    def read_plate(self, prompt: str) -> str:
        """Prompt until a usable license plate is entered; returns it upper-cased"""
        while True:
            plate = self.read_non_empty(prompt).upper()
            if len(plate) <= MAX_PLATE_LENGTH:
                return plate
            self.say(f"License plate cannot be longer than {MAX_PLATE_LENGTH} characters.")

    # ========================================================================
    # MAIN LOOP
    # ========================================================================

    def run(self) -> None:
        self.print_welcome()
        while True:
            self.print_menu()
            choice = self.read_int("Choose an option: ")
            if choice == len(MENU_ITEMS):
                self.say("Closing the simulator. Goodbye!")
                break

            handler = self._handlers.get(choice)
            if handler is None:
                self.say("Invalid choice, please select a valid option.")
                continue
            handler()

    def print_welcome(self) -> None:
        self.say("====================================")
        self.say("    WELCOME TO THE PARKING SIMULATOR")
        self.say("====================================")
        self.say(f"Current simulation time: {format_timestamp(self.service.current_time)}")
        self.say()

    def print_menu(self) -> None:
        self.say("\nMenu:")
        for number, label in enumerate(MENU_ITEMS, start=1):
            self.say(f"{number}. {label}")

    # ========================================================================
    # MENU ACTIONS
    # ========================================================================

    def handle_vehicle_entry(self) -> None:
        self.say("\nVehicle Entry")
        self.say("-------------")

        if self.service.get_availability().available == 0:
            self.say("Sorry, the car park is full. No spaces available.")
            return

        plate = self.read_plate("Enter license plate: ")

        self.say("Select vehicle type:")
        for number, category in VehicleFactory.MENU_CHOICES.items():
            self.say(f"{number}. {category.label} (rate: {category.hourly_rate:.2f} per hour)")
        category = VehicleFactory.category_for_choice(self.read_int("Choice: "))
        if category is None:
            self.say("Invalid vehicle type choice.")
            return

        try:
            result = self.service.register_entry(
                {"license_plate": plate, "category": category.value}
            )
        except ParkingServiceError as e:
            self.logger.warning(f"Entry rejected: {e}")
            self.say("Invalid vehicle details, the vehicle was not parked.")
            return

        if result.success:
            self.say(
                f"Vehicle parked in spot #{result.spot_number} "
                f"at {format_timestamp(result.entry_time)}"
            )
        else:
            self.say(result.message)

    def handle_vehicle_exit(self) -> None:
        self.say("\nVehicle Exit")
        self.say("------------")

        plate = self.read_non_empty("Enter license plate: ").upper()
        result = self.service.register_exit(plate)
        if not result.success:
            self.say(result.message)
            return

        session = result.session
        self.say("Vehicle exited successfully.")
        self.say(f"Type: {session.vehicle_type}")
        self.say(f"Entry time: {format_timestamp(session.entry_time)}")
        self.say(f"Exit time: {format_timestamp(session.exit_time)}")
        self.say(f"Duration: {result.billed_hours} hour(s)")
        self.say(f"Amount due: {result.fee:.2f}")

    def show_availability(self) -> None:
        availability = self.service.get_availability()
        self.say(
            f"Currently available parking spaces: "
            f"{availability.available} of {availability.capacity}"
        )

    def list_parked_vehicles(self) -> None:
        self.say("\nCurrently Parked Vehicles:")
        self.say("--------------------------")
        parked = self.service.list_parked_vehicles()
        if not parked:
            self.say("The car park is empty.")
            return
        for spot in parked:
            self.say(spot.display())

    def show_daily_report(self) -> None:
        self.say()
        self.say(self.service.generate_daily_report().rstrip("\n"))

    def clear_daily_report(self) -> None:
        self.service.clear_daily_report()
        self.say("Daily report cleared. A new day has started.")

    def advance_time(self, hours: Optional[int] = None, minutes: Optional[int] = None) -> None:
        self.say("\nAdvance Simulation Time")
        self.say("-----------------------")
        self.say(f"Current simulation time: {format_timestamp(self.service.current_time)}")
        if hours is None:
            hours = self.read_int("Hours to advance: ")
        if minutes is None:
            minutes = self.read_int("Minutes to advance: ")
        try:
            new_time = self.service.advance_time(hours, minutes)
        except ParkingServiceError as e:
            self.say(str(e))
            return

        self.say(f"Simulation time advanced to: {format_timestamp(new_time)}")
