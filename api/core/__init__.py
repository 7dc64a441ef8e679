"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every resource uses: DB wiring,
dynamic SQL fragments, error types and logging. Keep resource-specific SQL
and business rules in the resource package (e.g. `companies/`).
"""
