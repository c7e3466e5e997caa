# Garante o registro de TODAS as models no mesmo registry
from app.db.base_class import Base # noqa

# IMPORTS com efeito colateral (não remova)
from app.models.student import Student # noqa
