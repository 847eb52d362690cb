"""
n8n-ready

Scaffolds, checks and runs containerized n8n deployments.
"""

__version__ = "1.0.0"
