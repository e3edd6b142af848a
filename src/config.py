import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class Settings:
    log_level: str
    inventory_file: str
    results_file: str

    @classmethod
    def from_env(cls) -> "Settings":
        # Load environment variables from .env file, if there is one
        load_dotenv()
        return cls(
            log_level=os.getenv("RECORD_KEEPER_LOG_LEVEL", "INFO").upper(),
            inventory_file=os.getenv("RECORD_KEEPER_INVENTORY_FILE", "inventory.json"),
            results_file=os.getenv("RECORD_KEEPER_RESULTS_FILE", "results.txt"),
        )
