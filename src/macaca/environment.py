# src/macaca/environment.py


class Environment:
    """A name -> Object scope with an optional enclosing scope.

    Lookups walk outward through ``outer``; bindings are always made in the
    scope they are set on.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    def __contains__(self, name):
        env = self
        while env is not None:
            if name in env.store:
                return True
            env = env.outer
        return False

    def get(self, name, default=None):
        """Resolve ``name`` in this scope or the nearest enclosing one."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return default

    def set(self, name, value):
        """Bind ``name`` in this scope, shadowing any outer binding."""
        self.store[name] = value
        return value

    def extend(self, bindings=None):
        """Create a child scope whose outer scope is this one."""
        child = Environment(outer=self)
        if bindings:
            for name, value in bindings:
                child.set(name, value)
        return child

    def depth(self):
        count, env = 0, self.outer
        while env is not None:
            count += 1
            env = env.outer
        return count

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"
