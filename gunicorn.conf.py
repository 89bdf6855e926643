#!/usr/bin/env python3
"""
Gunicorn configuration for the Bloglist API.
Paths and sizing can be overridden through environment variables.
"""

import multiprocessing
import os

# Server socket
bind = os.environ.get("GUNICORN_BIND", "127.0.0.1:8000")
backlog = 2048

# Worker processes
workers = int(os.environ.get("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
timeout = 30
keepalive = 2

# Restart workers after this many requests
max_requests = 1000
max_requests_jitter = 100

# Logging ("-" writes to stdout/stderr)
accesslog = os.environ.get("GUNICORN_ACCESS_LOG", "-")
errorlog = os.environ.get("GUNICORN_ERROR_LOG", "-")
loglevel = os.environ.get("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s"'

proc_name = "bloglist_api"
daemon = False

# Application callable
wsgi_app = "wsgi:app"

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190

def on_starting(server):
    server.log.info("Starting Bloglist API")

def when_ready(server):
    server.log.info("Bloglist API is ready. Listening on: %s", server.address)

def on_exit(server):
    server.log.info("Shutting down Bloglist API")
