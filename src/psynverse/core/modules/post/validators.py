from psynverse.core.modules.post.models import NormalizedPost, PostInput
from psynverse.errors import ValidationError
from psynverse.utils import sanitize_slug


def _clean(value: str | None) -> str:
    return (value or "").strip()


def normalize_post_input(post: PostInput) -> NormalizedPost:
    """Trim fields and derive the canonical slug; reject posts missing title, date, excerpt or slug."""
    title = _clean(post.title)
    date = _clean(post.date)
    excerpt = _clean(post.excerpt)
    slug = sanitize_slug(_clean(post.slug) or title)

    missing = [name for name, value in (("title", title), ("date", date), ("excerpt", excerpt)) if not value]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    if not slug:
        raise ValidationError("Slug must contain at least one letter or digit")

    return NormalizedPost(
        slug=slug,
        title=title,
        date=date,
        excerpt=excerpt,
        tags=post.tags,
        content=_clean(post.content),
        cover_image=_clean(post.cover_image) or None,
        published=True if post.published is None else post.published,
    )
