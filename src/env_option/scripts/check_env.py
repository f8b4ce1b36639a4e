"""CLI: Check every variable declared in env_schema.json against the environment."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from env_option.constants.flags import DEFAULT_SCHEMA_FILE, SECRET_MASK
from env_option.utils.errors import NotPresent, ParseFailed
from env_option.utils.logger import configure_logging, get_check_logger
from env_option.utils.schema_utils import EnvSchema

logger = get_check_logger()


def check(schema: EnvSchema, environ: Optional[Mapping[str, str]] = None) -> int:
    """Print one line per declared variable and return the number of failures."""
    errors = 0
    for spec in schema.variables:
        try:
            value = spec.resolve(environ)
        except NotPresent as e:
            print(f"[MISSING] {spec.name}: {e.description}")
            errors += 1
            continue
        except ParseFailed as e:
            # The raw value may be a secret, so report only the cause type
            detail = type(e.cause).__name__ if spec.secret else str(e)
            print(f"[ERROR]   {spec.name}: {detail}")
            errors += 1
            continue

        shown = SECRET_MASK if spec.secret and value is not None else repr(value)
        print(f"[OK]      {spec.name} ({spec.type}) = {shown}")
    return errors


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    schema_path = Path(args[0] if args else DEFAULT_SCHEMA_FILE)

    # Searches .env in CWD or parents; existing variables win
    loaded = load_dotenv(find_dotenv(usecwd=True), override=False)
    # After .env so DEBUG_ENV_OPTION may come from there
    configure_logging()
    if loaded:
        logger.debug("Loaded local .env file")

    try:
        schema = EnvSchema.load(schema_path)
    except FileNotFoundError:
        logger.error(f"Declaration file not found: {schema_path}")
        return 2
    except ValidationError as e:
        logger.error(f"Invalid declaration file {schema_path}: {e}")
        return 2
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read declaration file {schema_path}: {e}")
        return 2

    errors = check(schema)

    print("-" * 20)
    if errors:
        print(f"Checked {len(schema.variables)} variables with {errors} problem(s).")
        return 1
    print(f"All {len(schema.variables)} variables resolved successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
