TABLES_URL = "/api/v1/dashboard/seating/tables"
TABLE_URL = "/api/v1/dashboard/seating/tables/{table_id}"
REORDER_TABLES_URL = "/api/v1/dashboard/seating/tables/reorder"
ASSIGN_GUEST_URL = "/api/v1/dashboard/seating/guests/{guest_id}/table"
SEATING_CHART_URL = "/api/v1/dashboard/seating"
SEATING_EXPORT_URL = "/api/v1/dashboard/seating/export"
