"""Internal constants shared across the library."""

from rentalstore.models._base import Bilingual

# Seed resource names, relative to the configured seed location.
# The literal "[]" means "seed with an empty collection".
EMPTY_SEED = "[]"

# Payment reminders go to customers whose remaining balance is strictly
# greater than this amount.
REMINDER_THRESHOLD: float = 500

# Shown wherever a car reference no longer resolves.
MISSING_REFERENCE_LABEL = "N/A"

# Denormalized into bookings whose car id does not resolve.
UNKNOWN_CAR_NAME = Bilingual(en="Unknown", ar="غير معروف")

# ------------------------------------------------------------------
# Auxiliary storage keys
# ------------------------------------------------------------------

LANGUAGE_KEY = "language"
ADMIN_SESSION_KEY = "isAdminAuthenticated"
NOTIFICATION_MESSAGE_KEY = "notificationMessage"

DEFAULT_NOTIFICATION_MESSAGE = (
    "عزيزي العميل، نود تذكيركم بوجود مبلغ متبقٍ على إيجار سيارتكم. "
    "يرجى التواصل معنا لترتيب عملية السداد. شكراً لتعاونكم."
)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "password"
