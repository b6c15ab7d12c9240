import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional brewery_id and run_id fields."""
    def format(self, record):
        if not hasattr(record, 'brewery_id'):
            record.brewery_id = '-'
        if not hasattr(record, 'run_id'):
            record.run_id = '-'
        return super().format(record)


def configure_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [brewery=%(brewery_id)s run=%(run_id)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level,
        handlers=[handler],
    )
