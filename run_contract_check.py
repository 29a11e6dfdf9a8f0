"""
Contract check script for a saved API response.

Reads:
  - an OpenAPI / swagger JSON document
  - a response body saved as JSON

Validates the body against a named definition and prints the report.

Usage:
    python run_contract_check.py swagger.json pet_response.json Pet [--lenient]
"""
import argparse
import logging
import sys

from contract_validation.config.settings import ContractSettings
from contract_validation.loader import load_json_document, load_openapi_spec
from contract_validation.models.openapi import ContractSpecError
from contract_validation.validators.contract_validator import ContractValidator

logger = logging.getLogger("run_contract_check")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a saved response against an OpenAPI definition.")
    parser.add_argument("spec", help="Path of the swagger / OpenAPI JSON document")
    parser.add_argument("response", help="Path of the response body (JSON)")
    parser.add_argument("schema", help="Definition name, e.g. Pet")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Report missing required fields as warnings instead of errors",
    )
    args = parser.parse_args(argv)

    settings = ContractSettings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stdout,
    )

    try:
        spec = load_openapi_spec(args.spec)
        body = load_json_document(args.response)
    except ContractSpecError as e:
        logger.error("%s", e)
        return 2

    validator = ContractValidator(spec, settings=settings)

    schema_check = validator.validate_schema_exists(args.schema)
    if not schema_check.valid:
        print(validator.format_validation_errors(schema_check))
        return 1

    result = validator.validate_response_against_schema(
        body,
        args.schema,
        strict_required=False if args.lenient else None,
    )

    print("\n" + "=" * 70)
    print(f"CONTRACT CHECK — {args.schema}")
    print("=" * 70)
    report = validator.format_validation_errors(result)
    print(report if report else "✅ Response matches the contract")
    print("=" * 70 + "\n")

    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
