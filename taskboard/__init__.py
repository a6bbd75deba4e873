"""Taskboard authorization backend.

Role-and-ownership authorization engine for the multi-tenant project
tracker (issues, sprints, projects, comments, time entries).
"""
