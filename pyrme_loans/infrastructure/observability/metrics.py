"""Prometheus metrics for calculator usage, eligibility bands and rejected input"""

from prometheus_client import Counter, Histogram

calculation_counter = Counter(
    "pyrme_calculation_total",
    "Total calculations served",
    ["operation"],  # emi | emi_schedule | eligibility | offer_rank
)

eligibility_band_counter = Counter(
    "pyrme_eligibility_band_total",
    "Eligibility results by band",
    ["band"],  # Excellent | Good | Fair | Poor
)

invalid_input_counter = Counter(
    "pyrme_invalid_input_total",
    "Calculations rejected by domain validation",
    ["operation"],
)

emi_installment_histogram = Histogram(
    "pyrme_emi_installment",
    "Monthly installments quoted, whole rupees",
    buckets=[2_500, 5_000, 10_000, 25_000, 50_000, 100_000, 250_000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str) -> None:
    calculation_counter.labels(operation=operation).inc()


def record_emi(monthly_installment: int) -> None:
    """Record an EMI quote for installment distribution analysis"""
    record_calculation("emi")
    emi_installment_histogram.observe(monthly_installment)


def record_eligibility(band: str) -> None:
    """Record eligibility outcome for band distribution monitoring"""
    record_calculation("eligibility")
    eligibility_band_counter.labels(band=band).inc()


def record_invalid_input(operation: str) -> None:
    invalid_input_counter.labels(operation=operation).inc()
