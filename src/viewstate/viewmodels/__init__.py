"""
View Models - Bindable State for Customer Editing

Structure:
- base: observable objects, dependency table, workspace closing
- command: guarded commands
- collection: list with membership notifications
- customer: editing surface for one customer
- all_customers: live customer list with selection total
"""

from .base import ObservableObject, ViewModelBase, WorkspaceViewModel
from .command import RelayCommand
from .collection import ObservableCollection, CollectionChangedEventArgs, CollectionChangeAction
from .customer import CustomerViewModel, CustomerType
from .all_customers import AllCustomersViewModel

__all__ = [
    "ObservableObject", "ViewModelBase", "WorkspaceViewModel",
    "RelayCommand",
    "ObservableCollection", "CollectionChangedEventArgs", "CollectionChangeAction",
    "CustomerViewModel", "CustomerType",
    "AllCustomersViewModel",
]
