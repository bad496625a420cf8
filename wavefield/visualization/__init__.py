from .colormap import field_to_rgba
from .preview import preview
from .animator import PhysicsAnimator

__all__ = ["PhysicsAnimator", "field_to_rgba", "preview"]
