"""
Records App - Daily Sales and Expenses

Stores one row per shop day with sales, expenses and the derived profit
(always sales - expenses), and exposes CRUD operations over HTTP.

Architecture:
- Models: DailyRecord
- Services: list_records, get_record, create_record, update_record, delete_record
- Views: DailyRecordViewSet (RESTful JSON API)
"""
