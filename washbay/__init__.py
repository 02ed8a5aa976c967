"""
Wash Bay Manager: vehicle wash pipeline, service catalog and revenue reports.
"""
