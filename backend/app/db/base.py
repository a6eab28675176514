from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.student import Student  # noqa: F401
from backend.app.models.user import User  # noqa: F401
from backend.app.models.user_session import UserSession  # noqa: F401
from backend.app.models.attendance import Attendance  # noqa: F401
from backend.app.models.grade import Grade  # noqa: F401
from backend.app.models.behavior import Behavior  # noqa: F401
