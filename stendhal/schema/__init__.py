import os
import json
import jsonschema

TABLE_SCHEMA = "item_table.schema.json"
SCHEMA_VERSION = 1.0
SCHEMA_DIR = os.path.dirname(os.path.abspath(__file__))


def load_schema(schema_name=TABLE_SCHEMA):
    with open(os.path.join(SCHEMA_DIR, schema_name)) as fp:
        return json.load(fp)


def validate_table(struct):
    """Stamps the schema version on an item table and validates it.

    Raises jsonschema.ValidationError when the table does not conform.
    """
    struct["schema_version"] = SCHEMA_VERSION
    jsonschema.validate(struct, load_schema())
    return struct
