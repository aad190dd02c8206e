import sys
import os
import traceback

# Add project root to path (one level up from this file)
root_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from src.utils.logger import log
from src.config.manager import config_manager

EXIT_READY = 0
EXIT_NOT_READY = 1
EXIT_ERROR = 2


def main() -> int:
    try:
        log.info("Starting AI hardware readiness check...")

        from src.schemas.assessment import RatingBand
        from src.services.assessment_service import AssessmentService
        from src.ui.report_presenter import ReportPresenter

        service = AssessmentService()
        inventory, result = service.assess_current_system()
        print(ReportPresenter().render(inventory, result))

        minimum = RatingBand(config_manager.get("minimum_rating", "FAIR").upper())
        if service.meets_requirement(result, minimum):
            log.info(f"Rating {result.rating_band.value} meets the minimum of {minimum.value}.")
            return EXIT_READY

        log.warning(f"Rating {result.rating_band.value} is below the minimum of {minimum.value}.")
        return EXIT_NOT_READY

    except Exception as e:
        log.critical(f"Unhandled exception: {e}")
        traceback.print_exc()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
