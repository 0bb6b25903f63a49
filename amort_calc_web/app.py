import logging
import os

from flask import Flask, jsonify, request

from amort_calc.data_models import LoanTerms
from amort_calc.engine import DEFAULT_MAX_PERIODS, compute_schedule
from amort_calc.exceptions import AmortizationError
from amort_calc.options import DEFAULT_TERMS, FREQUENCY_LABELS, compounding_options, default_compounding
from amort_calc.utils import decimal_from_str, parse_amount

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_PERIODS"] = int(os.environ.get("AMORT_CALC_MAX_PERIODS", DEFAULT_MAX_PERIODS))


def _field(data, name: str, default) -> str:
    value = data.get(name)
    if value is None or str(value).strip() == "":
        return str(default)
    return str(value).strip()


def _parse_int(data, name: str, default) -> int:
    raw = _field(data, name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {name}: {raw}") from exc


def _request_to_terms(data) -> LoanTerms:
    """Build ``LoanTerms`` from a JSON object or form, falling back to defaults."""
    frequency = _parse_int(data, "payment_frequency", DEFAULT_TERMS.payment_frequency)
    compounding = _parse_int(data, "compounding_frequency", default_compounding(frequency))
    if compounding > frequency:
        raise ValueError("Compounding cannot be more frequent than payments")
    return LoanTerms(
        principal=parse_amount(_field(data, "principal", DEFAULT_TERMS.principal)),
        annual_rate=decimal_from_str(_field(data, "annual_rate", DEFAULT_TERMS.annual_rate)),
        compounding_frequency=compounding,
        payment_frequency=frequency,
        term_years=decimal_from_str(_field(data, "term_years", DEFAULT_TERMS.term_years)),
    )


def _defaults_payload() -> dict:
    return {
        "principal": float(DEFAULT_TERMS.principal),
        "annual_rate": float(DEFAULT_TERMS.annual_rate),
        "compounding_frequency": DEFAULT_TERMS.compounding_frequency,
        "payment_frequency": DEFAULT_TERMS.payment_frequency,
        "term_years": float(DEFAULT_TERMS.term_years),
    }


@app.get("/api/options")
def options():
    frequencies = [{"value": value, "text": label} for value, label in FREQUENCY_LABELS.items()]
    return jsonify(
        {
            "frequencies": frequencies,
            "compounding": {
                str(value): [f.value for f in compounding_options(value)] for value in FREQUENCY_LABELS
            },
            "defaults": _defaults_payload(),
        }
    )


@app.post("/api/schedule")
def schedule():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form
    try:
        terms = _request_to_terms(data)
        rows, summary = compute_schedule(terms, max_periods=app.config["MAX_PERIODS"])
    except (AmortizationError, ValueError) as exc:
        logger.info("Rejected schedule request: %s", exc)
        return jsonify({"error": str(exc)}), 400
    return jsonify({"summary": summary, "schedule": [row.to_dict() for row in rows]})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print("Starting amortization calculator API...")
    app.run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8710)),
        debug=os.environ.get("FLASK_DEBUG", "0") == "1",
    )
