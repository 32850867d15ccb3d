# Bind & workers
bind = "0.0.0.0:8000"
# Registrations live in process memory: a second worker would hold a second,
# disjoint store. Scale with threads; the store serializes its mutations.
workers = 1
threads = 4
wsgi_app = "signup.wsgi:app"
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override with env LOG_LEVEL

# Honour proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
