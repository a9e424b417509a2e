from prometheus_client import Counter

# Business Metrics
orders_written_total = Counter(
    "orders_written_total",
    "Order rows written",
    ["operation"] # Labels: 'create', 'update', 'delete'
)

order_lines_written_total = Counter(
    "order_lines_written_total",
    "Order product lines written",
    ["operation"] # Labels: 'create', 'update', 'delete'
)
