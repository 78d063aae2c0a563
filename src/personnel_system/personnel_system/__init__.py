"""Personnel System package.

Feature modules (employees, timesheets, attachments, views) sit on top of a
small storage layer; Flask controllers are kept thin and delegate to the
service layer.
"""
