from collections import Counter
from typing import FrozenSet, Iterable
from ..domain.models import Repo

def find_duplicate_names(repos: Iterable[Repo]) -> FrozenSet[str]:
    """
    Names carried by more than one repo. The UI shows the owning
    source folder next to these to tell them apart.
    """
    counts = Counter(repo.name for repo in repos)
    return frozenset(name for name, count in counts.items() if count > 1)
