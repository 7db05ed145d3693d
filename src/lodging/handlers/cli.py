"""対話メニュー（typer + rich）"""

from collections.abc import Callable
from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt
from rich.table import Table

from lodging.config import load_settings
from lodging.directory import Directory
from lodging.handlers import handlers

app = typer.Typer(
    name="lodging",
    help="In-memory records for rooms, staff, reservations and orders.",
    add_completion=False,
)

MENU = [
    "Add Room",
    "Add Employee",
    "Make Reservation",
    "Checkout Room",
    "Update Employee Position",
    "Add Food Order",
    "Display Hotel Details",
    "Display Rooms",
    "Display Employees",
    "Display Reservations",
    "Display Food Orders",
    "Exit",
]
EXIT_CHOICE = len(MENU)


def _ask_text(console: Console, label: str) -> str:
    """空文字列を受け付けずに再入力させる"""
    while True:
        value = Prompt.ask(label, console=console)
        if value.strip():
            return value
        console.print("Invalid input. Please enter a non-empty string.", style="red")


def _ask_int(console: Console, label: str) -> int:
    return IntPrompt.ask(label, console=console)


def _render_result(console: Console, response: dict) -> None:
    if response["status"] == "error":
        console.print(response["message"], style="red", markup=False)
        return
    if response.get("message"):
        console.print(response["message"], style="green", markup=False)


def _rooms_table(rooms: list[dict]) -> Table:
    table = Table(title="Rooms")
    table.add_column("Room Number")
    table.add_column("Room Type")
    table.add_column("Booking Status")
    for room in rooms:
        state = "Booked" if room["status"] == "BOOKED" else "Available"
        table.add_row(str(room["room_number"]), room["room_type"], state)
    return table


def _employees_table(employees: list[dict]) -> Table:
    table = Table(title="Employees")
    for column in ("Employee ID", "Name", "Age", "Position"):
        table.add_column(column)
    for e in employees:
        table.add_row(str(e["employee_id"]), e["name"], str(e["age"]), e["position"])
    return table


def _reservations_table(reservations: list[dict]) -> Table:
    table = Table(title="Reservations")
    for column in ("Guest ID", "Name", "Age", "Room", "Duration"):
        table.add_column(column)
    for r in reservations:
        room = r["room"]
        room_label = f"{room['room_number']} ({room['room_type']})" if room else "-"
        table.add_row(
            str(r["guest"]["guest_id"]),
            r["guest"]["name"],
            str(r["guest"]["age"]),
            room_label,
            f"{r['duration_days']} days",
        )
    return table


def _orders_table(orders: list[dict]) -> Table:
    table = Table(title="Food Orders")
    for column in ("Guest ID", "Item", "Quantity", "Price", "Placed At"):
        table.add_column(column)
    for o in orders:
        table.add_row(
            str(o["guest_id"]),
            o["item"],
            str(o["quantity"]),
            f"{o['currency']} {o['price_amount']}",
            o["placed_at"],
        )
    return table


def _render_listing(
    console: Console, response: dict, build: Callable[[list[dict]], Table]
) -> None:
    if response["status"] == "error":
        _render_result(console, response)
        return
    console.print(build(response["data"]))


def _render_hotel(console: Console, response: dict) -> None:
    if response["status"] == "error":
        _render_result(console, response)
        return
    data = response["data"]
    console.print(f"Hotel: {data['hotel_name']}", style="bold", markup=False)
    console.print(_rooms_table(data["rooms"]))
    console.print(_employees_table(data["employees"]))
    console.print(_reservations_table(data["reservations"]))
    console.print(_orders_table(data["orders"]))


def run_choice(console: Console, directory: Directory, choice: int) -> None:
    """メニュー番号に対応する操作を1回実行する"""
    if choice == 1:
        payload = {
            "room_number": _ask_int(console, "Enter room number"),
            "room_type": _ask_text(console, "Enter room type"),
        }
        _render_result(console, handlers.add_room(directory, payload))
    elif choice == 2:
        payload = {
            "name": _ask_text(console, "Enter employee name"),
            "age": _ask_int(console, "Enter employee age"),
            "employee_id": _ask_int(console, "Enter employee ID"),
            "position": _ask_text(console, "Enter employee position"),
        }
        _render_result(console, handlers.add_employee(directory, payload))
    elif choice == 3:
        payload = {
            "name": _ask_text(console, "Enter guest name"),
            "age": _ask_int(console, "Enter guest age"),
            "guest_id": _ask_int(console, "Enter guest ID"),
            "room_number": _ask_int(console, "Enter room number"),
            "duration_days": _ask_int(console, "Enter duration of stay (days)"),
        }
        _render_result(console, handlers.make_reservation(directory, payload))
    elif choice == 4:
        payload = {"room_number": _ask_int(console, "Enter room number")}
        _render_result(console, handlers.checkout_room(directory, payload))
    elif choice == 5:
        payload = {
            "employee_id": _ask_int(console, "Enter employee ID"),
            "new_position": _ask_text(console, "Enter new position"),
        }
        _render_result(console, handlers.update_employee_position(directory, payload))
    elif choice == 6:
        payload = {
            "guest_id": _ask_int(console, "Enter guest ID"),
            "item": _ask_text(console, "Enter food item"),
            "quantity": _ask_int(console, "Enter quantity"),
            "price": FloatPrompt.ask("Enter price", console=console),
        }
        _render_result(console, handlers.add_order(directory, payload))
    elif choice == 7:
        _render_hotel(console, handlers.hotel_details(directory))
    elif choice == 8:
        _render_listing(console, handlers.list_rooms(directory), _rooms_table)
    elif choice == 9:
        _render_listing(console, handlers.list_employees(directory), _employees_table)
    elif choice == 10:
        _render_listing(
            console, handlers.list_reservations(directory), _reservations_table
        )
    elif choice == 11:
        _render_listing(console, handlers.list_orders(directory), _orders_table)
    else:
        console.print("Invalid choice. Please try again.", style="red")


@app.command()
def main(
    hotel_name: Optional[str] = typer.Option(
        None,
        "--hotel-name",
        help="Name shown in the hotel details view",
    ),
):
    """Run the interactive records menu."""
    console = Console()
    settings = load_settings()
    if hotel_name:
        settings = replace(settings, hotel_name=hotel_name)
    try:
        directory = Directory.create(settings=settings)
    except ValueError as e:
        console.print(f"Invalid configuration. {e}", style="red", markup=False)
        raise typer.Exit(code=1)

    try:
        while True:
            console.rule(settings.hotel_name)
            for number, label in enumerate(MENU, start=1):
                console.print(f"{number}. {label}", markup=False)
            choice = _ask_int(console, "Enter your choice")
            if choice == EXIT_CHOICE:
                break
            run_choice(console, directory, choice)
    except EOFError:
        console.print()
    console.print("Exiting the system. Goodbye!", style="bold red")
