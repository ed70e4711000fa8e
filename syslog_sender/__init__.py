"""syslog-sender — send a single BSD-style syslog message over UDP or TCP."""

APP_NAME = "syslog-sender"
APP_VERSION = "0.2.0"
APP_PROJECT = "https://github.com/wellsgz/syslog-sender"
