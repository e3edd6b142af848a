import sys
import logging

from src.config import Settings
from src.application.finance_service import build_demo_service
from src.application.health_service import HealthSystemService
from src.application.inventory_log_service import InventoryLogService
from src.application.student_service import collect_students
from src.application.warehouse_service import WarehouseManager
from src.domain.exceptions import (
    DuplicateKeyException,
    EntityNotFoundException,
    InvalidValueException,
)
from src.domain.models import ElectronicItem, format_currency

logger = logging.getLogger(__name__)


def print_lines(title: str, lines) -> None:
    print(f"\n--- {title} ---")
    for line in lines:
        print(line)


def run_finance(_settings: Settings) -> None:
    service = build_demo_service()
    service.run_demo()
    print(f"\nFinal balance for {service.account.account_number}: {format_currency(service.account.balance)}")


def run_health(_settings: Settings) -> None:
    service = HealthSystemService()
    service.seed_data()
    service.build_prescription_map()

    print_lines("All Patients", service.describe_patients())
    print_lines("Prescriptions for patient 2", service.describe_prescriptions(2))


def run_inventory(settings: Settings) -> None:
    service = InventoryLogService(settings.inventory_file)
    service.seed_sample_data()
    service.save_data()

    # A new instance stands in for a new session
    service = InventoryLogService(settings.inventory_file)
    service.load_data()
    print_lines("Inventory Log", service.describe_items())


def run_students(settings: Settings) -> None:
    processor = collect_students()
    print_lines("Student Results", processor.describe_results())
    try:
        processor.save_results(settings.results_file)
    except OSError as e:
        logger.error(f"Could not save results to '{settings.results_file}': {e}")


def run_warehouse(_settings: Settings) -> None:
    manager = WarehouseManager()
    manager.seed_data()
    print_lines("Grocery Items", manager.describe_items(manager.groceries))
    print_lines("Electronic Items", manager.describe_items(manager.electronics))

    manager.increase_stock(manager.groceries, 102, 15)
    manager.remove_item_by_id(manager.groceries, 103)

    print("\nAttempting to add duplicate electronic item (ID:1) ...")
    try:
        manager.electronics.add(ElectronicItem(id=1, name="Tablet", quantity=3, brand="Apple", warranty_months=18))
    except DuplicateKeyException as e:
        logger.warning(f"DuplicateKeyException caught: {e}")

    print("\nAttempting to remove non-existent electronic item (ID:999) ...")
    try:
        manager.electronics.remove(999)
    except EntityNotFoundException as e:
        logger.warning(f"EntityNotFoundException caught: {e}")

    print("\nAttempting to set negative quantity for electronic item (ID:2) ...")
    try:
        manager.electronics.update_quantity(2, -10)
    except InvalidValueException as e:
        logger.warning(f"InvalidValueException caught: {e}")

    print_lines("Final Electronic Items", manager.describe_items(manager.electronics))
    print_lines("Final Grocery Items", manager.describe_items(manager.groceries))


DEMOS = {
    "finance": run_finance,
    "health": run_health,
    "inventory": run_inventory,
    "students": run_students,
    "warehouse": run_warehouse,
}
# The student tool reads from stdin, so it only runs when asked for by name
NON_INTERACTIVE = ["finance", "health", "inventory", "warehouse"]


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    name = argv[0] if argv else "all"
    if name != "all" and name not in DEMOS:
        logger.error(f"Unknown demo '{name}'. Choose one of: all, {', '.join(DEMOS)}.")
        return 2

    names = NON_INTERACTIVE if name == "all" else [name]
    try:
        for demo in names:
            logger.info(f"Running {demo} demo.")
            DEMOS[demo](settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user. Exiting gracefully.")
    except Exception as e:
        logger.exception(f"An unexpected error occurred: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
