"""Submit one pickup request from a JSON description file.

Credentials come from the same environment variables as the service
(`UPS_USERNAME`, `UPS_PASSWORD`, `UPS_ACCESS_KEY`).
"""

import argparse
import asyncio
import json
from pathlib import Path

from freightpickup.common.config import CarrierConfig, settings
from freightpickup.common.logging import configure_logging
from freightpickup.common.startup import log_startup_config
from freightpickup.services.pickup.errors import PickupError, RemoteRejection
from freightpickup.services.pickup.models import PickupDescription
from freightpickup.services.pickup.service import PickupService


async def submit(description: PickupDescription, production: bool) -> None:
    """Send the request and print the confirmation or the carrier's fault entries."""

    config = CarrierConfig.from_settings(settings)
    config.select_endpoint(production or settings.ups_production)
    log_startup_config("request-pickup-cli", config, ["LOG_LEVEL"])
    service = PickupService(config, service_name="request-pickup-cli")
    try:
        confirmation = await service.request_pickup(description)
    except RemoteRejection as exc:
        for entry in exc.fault.errors:
            print(f"{entry.severity} {entry.primary_error_code.code}: {entry.primary_error_code.description}")
        raise SystemExit(f"rejected: {exc}")
    except PickupError as exc:
        raise SystemExit(f"failed: {exc}")
    print(f"confirmation_number={confirmation.confirmation_number}")


def main() -> None:
    """Parse CLI args and submit one pickup description."""

    parser = argparse.ArgumentParser(description="Schedule one UPS Freight LTL pickup.")
    parser.add_argument("--file", dest="json_file", required=True, help="Path to pickup description JSON")
    parser.add_argument("--production", action="store_true", help="Use the production endpoint")
    args = parser.parse_args()

    configure_logging()
    description = PickupDescription.model_validate(json.loads(Path(args.json_file).read_text()))
    asyncio.run(submit(description, args.production))


if __name__ == "__main__":
    main()
