from .setup import setup_observability
from .metrics import (
    orders_written_total,
    order_lines_written_total
)
