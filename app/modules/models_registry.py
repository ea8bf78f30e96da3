# -*- coding: utf-8 -*-
"""
backend/app/modules/models_registry.py

Importa todos los modelos ORM para registrarlos en Base.metadata.

Usado por init_models() y por los fixtures de tests antes de create_all;
el orden respeta las FKs (users → projects/gigs → proposals/orders → files).
"""

from app.modules.auth.models import User  # noqa: F401
from app.modules.projects.models import Project, Skill, ProjectSkill  # noqa: F401
from app.modules.gigs.models import Gig  # noqa: F401
from app.modules.proposals.models import Proposal  # noqa: F401
from app.modules.orders.models import Order  # noqa: F401
from app.modules.files.models import FileRecord  # noqa: F401
