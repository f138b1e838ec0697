import dotenv

from lazysupply.settings import BoolSetting, FloatSetting

dotenv.load_dotenv()

# === Lazy ===
# Should a cell whose producer raised call the producer again on the next get()?
# If false the first failure is re-raised forever.
retry_failed_producer = BoolSetting('lazy_retry_failed_producer', True, doc='Retry a failed producer on the next get()')
# Seconds a producer may run before we log about it.
slow_producer = FloatSetting('lazy_slow_producer', 5.0, doc='Warn when a producer takes longer than this many seconds')
