from enum import Enum


class LogFormat(Enum):
    JSON = "json"
    NGINX = "nginx"
    APACHE = "apache"
    TEXT = "text"

    @property
    def is_access_log(self):
        return self in (LogFormat.NGINX, LogFormat.APACHE)
