__all__ = ['preview']
