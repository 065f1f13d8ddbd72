"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL statements for a group of hotel tables.
Inserts assign the next surrogate id (current maximum plus one) inside the
statement itself and read it back with RETURNING.
Report queries print their result set through db.statements.execute_query.
"""
