# Supabase public schema: tables this backend reads and writes.
# Row shapes live in app/modules/<table>/schemas.py; this module only holds
# the JSON value type and the table/relationship names shared by services.

from typing import Dict, List, Union

Json = Union[str, int, float, bool, None, Dict[str, "Json"], List["Json"]]

COURSE_TYPES_TABLE = "course_types"
SCHEDULES_TABLE = "schedules"

# schedules.course_type_id -> course_types.id
SCHEDULES_COURSE_TYPE_FKEY = "schedules_course_type_id_fkey"

# PostgREST / Postgres error codes surfaced by the data API
FOREIGN_KEY_VIOLATION = "23503"
