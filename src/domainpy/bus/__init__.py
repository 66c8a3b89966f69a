"""Topic observables for publishing guarded events and messages."""

from domainpy.bus.observable import EventObservable, MessageObservable, Observable

__all__ = ["EventObservable", "MessageObservable", "Observable"]
