from researchai.db.models import Base, GenerationLog
from researchai.db.repository import record_generation, recent_generations
from researchai.db.session import get_db, init_db
