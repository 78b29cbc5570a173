"""
Dashboard App - Daily Records Page

Server-rendered page listing daily records with sales, expenses and profit
totals, an entry form for new records and per-row delete.
"""
