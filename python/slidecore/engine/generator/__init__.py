from slidecore.engine.generator.generator import GameGenerator

__all__ = ["GameGenerator"]
