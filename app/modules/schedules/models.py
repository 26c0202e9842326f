# Supabase table: schedules
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
- course_type_id: uuid (foreign key to course_types.id, not null,
  constraint schedules_course_type_id_fkey)
- day: integer (not null) - 1 = Lundi ... 7 = Dimanche
- start_hour: time (not null)
- end_hour: time (not null)
- priority: integer (not null, default: 0)
"""
