"""Doubly linked list with functional operations and change notifications."""

from superlist.events import (ChangeNotifier, ItemAction, ItemChangedEvent,
                              Observer)
from superlist.node import Node
from superlist.superlist import SEPARATOR, SuperList, default_eq

__all__ = ['ChangeNotifier', 'ItemAction', 'ItemChangedEvent', 'Node',
           'Observer', 'SEPARATOR', 'SuperList', 'default_eq']
