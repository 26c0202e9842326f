# Supabase table: course_types
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
- name: text (not null)
- display_order: integer (not null, default: 0)

Referenced by schedules.course_type_id (schedules_course_type_id_fkey).
"""
