"""Example: use the services directly, without a presentation layer."""

import logging

from src.training_attendance.training_attendance.attendance.duration import to_hour_minute
from src.training_attendance.training_attendance.attendance.model import TrainingTime
from src.training_attendance.training_attendance.attendance.options import blank_time_options
from src.training_attendance.training_attendance.main import create_container


def main():
    logging.basicConfig(level=logging.INFO)
    container = create_container()

    status = container.classifier.classify_default(TrainingTime.parse("09:20"), TrainingTime.parse("17:40"))
    print("status:", status.value, repr(status.label))
    print("blank 95 min:", to_hour_minute(95))
    print("blank options:", list(blank_time_options().values())[:5])

    today = container.training_date_resolver.today()
    print("today:", container.date_normalizer.format(today))
    print("work day:", container.work_day_checker.is_work_day(1, today))


if __name__ == "__main__":
    main()
