"""
Jobly: companies, jobs and users over a relational database.
"""
