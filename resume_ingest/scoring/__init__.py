from .ats import action_verbs_found, description_bullets, present_sections, score

__all__ = [
    "score",
    "present_sections",
    "action_verbs_found",
    "description_bullets",
]
