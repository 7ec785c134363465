"""Domain modules package."""

from zabanyar.modules.admin import models as admin_models  # noqa: F401
from zabanyar.modules.billing import models as billing_models  # noqa: F401
from zabanyar.modules.booking import models as booking_models  # noqa: F401
from zabanyar.modules.classes import models as classes_models  # noqa: F401
from zabanyar.modules.identity import models as identity_models  # noqa: F401
from zabanyar.modules.listening_practice import models as listening_practice_models  # noqa: F401
from zabanyar.modules.news_articles import models as news_articles_models  # noqa: F401
from zabanyar.modules.notifications import models as notifications_models  # noqa: F401
from zabanyar.modules.scheduling import models as scheduling_models  # noqa: F401
from zabanyar.modules.students import models as students_models  # noqa: F401
from zabanyar.modules.teachers import models as teachers_models  # noqa: F401
from zabanyar.modules.writing_practice import models as writing_practice_models  # noqa: F401
