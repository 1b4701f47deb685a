"""Static reference data.

Data that doesn't change with API calls: the default search area and the
preset life lists / species catalog.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from lifer_planner.reference.geography import CHICAGO_WEST as CHICAGO_WEST
from lifer_planner.reference.geography import SearchArea as SearchArea
from lifer_planner.reference.life_lists import COMMON_CHICAGO_BIRDS as COMMON_CHICAGO_BIRDS
from lifer_planner.reference.life_lists import DEMO_LIFE_LIST as DEMO_LIFE_LIST
from lifer_planner.reference.life_lists import PRESETS as PRESETS
from lifer_planner.reference.life_lists import CatalogBird as CatalogBird
from lifer_planner.reference.life_lists import search_catalog as search_catalog
