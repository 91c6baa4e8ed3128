"""
Export Role Table Script
Writes the active role -> permission table to YAML together with its content
fingerprint, so every service enforcing permissions can embed the same file.
Can be run manually or as part of a release job.
"""

import argparse
import sys
import logging

from app.config.settings import settings
from app.modules.rbac.loader import default_role_table, dump_role_table, load_role_table

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "permissions.yml"


def export_role_table(output_path: str, source_path: str = None):
    """Load the table from ``source_path`` (or the built-in one) and write it to ``output_path``"""
    table = load_role_table(source_path) if source_path else default_role_table()
    logger.info(f"Exporting {len(table)} roles, version {table.version}")

    for role, permissions in table.to_dict().items():
        logger.debug(f"{role}: {len(permissions)} permissions")

    written = dump_role_table(table, output_path)
    logger.info(f"Role table written to {written}")
    return table


def main(argv=None):
    """Main function to export the role table"""
    parser = argparse.ArgumentParser(description="Export the RBAC role table as YAML")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument("--source", default=settings.rbac_table_path,
                        help="YAML table to re-export instead of the built-in one")
    args = parser.parse_args(argv)

    try:
        export_role_table(args.output, args.source)
    except Exception as e:
        logger.error(f"Error during export: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
