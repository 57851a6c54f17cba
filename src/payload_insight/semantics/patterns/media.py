"""Media patterns: avatar, thumbnail, image, video, audio.

Registered specific-first: an ``avatar_url`` holding an image URL scores
the same for avatar and generic url, and registration order breaks the tie.
"""

from ..models import SemanticCategory, SemanticPattern
from ..validators import is_audio_url, is_image_url, is_video_url
from .base import SPECIFIC_VALUE_WEIGHT, fmt, names, types, value

AVATAR = SemanticPattern(
    category=SemanticCategory.AVATAR,
    name_patterns=(
        names(
            r"avatar|avatars|gravatar|headshot|profile (?:pic|picture|image|photo)|"
            r"user (?:image|photo|pic)|foto (?:de )?perfil|photo de profil|profilbild",
            "en", "es", "fr", "de",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_image_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri"),),
)

THUMBNAIL = SemanticPattern(
    category=SemanticCategory.THUMBNAIL,
    name_patterns=(
        names(r"thumb|thumbs|thumbnail|thumbnails|preview|miniatura|vignette|vorschau", "en", "es", "fr", "de"),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_image_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri"),),
)

IMAGE = SemanticPattern(
    category=SemanticCategory.IMAGE,
    name_patterns=(
        names(
            r"image|images|img|photo|photos|picture|pictures|pic|icon|logo|cover|banner|poster|"
            r"imagen|imagenes|foto|fotos|bild|bilder",
            "en", "es", "de", "pt",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_image_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri"),),
)

VIDEO = SemanticPattern(
    category=SemanticCategory.VIDEO,
    name_patterns=(
        names(r"video|videos|movie|clip|film|trailer|pelicula", "en", "es"),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_video_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri"),),
)

AUDIO = SemanticPattern(
    category=SemanticCategory.AUDIO,
    name_patterns=(
        names(
            r"audio|sound|podcast|recording|voice|song|music|"
            r"sonido|musica|klang|musik|audio file|audio link",
            "en", "es", "de", "pt",
        ),
    ),
    type_constraint=types("string"),
    value_validators=(value(is_audio_url, SPECIFIC_VALUE_WEIGHT),),
    format_hints=(fmt("uri"),),
)

MEDIA_PATTERNS = (AVATAR, THUMBNAIL, IMAGE, VIDEO, AUDIO)
