"""偏好存储 - 带过期时间的键值对，保存为JSON文件"""
import json
import logging
import os
from datetime import datetime, timedelta, timezone

from config.config import PREFERENCE_CONFIG

logger = logging.getLogger(__name__)


class PreferenceStore:
    """
    字符串键值存储，每个条目带过期时间
    文件格式: {key: {"value": str, "expires": ISO时间}}
    """

    def __init__(self, path=None, retention_days=None, clock=None):
        self.path = path or PREFERENCE_CONFIG['path']
        self.retention_days = retention_days or PREFERENCE_CONFIG['retention_days']
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._entries = self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preference file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preference file {self.path}")
            return {}
        return data

    def _save(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._entries, f, indent=2, sort_keys=True)

    def get(self, key):
        """读取值；不存在、已过期或条目格式错误时返回None"""
        entry = self._entries.get(key)
        if not isinstance(entry, dict) or 'value' not in entry:
            return None
        if not isinstance(entry['value'], str):
            logger.warning(f"Ignoring non-string preference {key}: {entry['value']!r}")
            return None
        try:
            expires = datetime.fromisoformat(entry['expires'])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Ignoring preference {key} with invalid expiry")
            return None
        # 不带时区的过期时间无法与当前时间比较
        if expires.tzinfo is None:
            logger.warning(f"Ignoring preference {key} with naive expiry {entry['expires']}")
            return None
        if expires <= self._clock():
            return None
        return entry['value']

    def set(self, key, value, days=None):
        days = self.retention_days if days is None else days
        expires = self._clock() + timedelta(days=days)
        self._entries[key] = {'value': str(value), 'expires': expires.isoformat()}
        self._save()
        logger.info(f"Preference {key}={value} saved")

    def get_or_default(self, key):
        value = self.get(key)
        if value is None:
            return PREFERENCE_CONFIG['defaults'].get(key)
        return value
