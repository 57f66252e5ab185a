"""
AllCustomersViewModel: collection wiring, repository mirroring and the selection total.
"""

import pytest

from viewstate import (
    AllCustomersViewModel, ArgumentError, Customer, CustomerAddedEventArgs, CustomerType,
    CustomerViewModel, Strings,
)


@pytest.fixture
def all_customers(repository):
    view_model = AllCustomersViewModel(repository)
    yield view_model
    view_model.dispose()


def new_customer(total_sales=10.0):
    return Customer.create_customer(total_sales, "New", "Person", False, "new@example.com")


class TestConstruction:

    def test_repository_is_required(self):
        with pytest.raises(ArgumentError):
            AllCustomersViewModel(None)

    def test_wraps_repository_customers_in_order(self, all_customers, customers):
        assert all_customers.display_name == Strings.ALL_CUSTOMERS_VIEW_MODEL_DISPLAY_NAME
        assert len(all_customers.all_customers) == len(customers)
        for view_model, customer in zip(all_customers.all_customers, customers):
            assert view_model.wraps(customer)

    def test_members_are_wired_before_exposure(self, all_customers):
        for view_model in all_customers.all_customers:
            assert view_model.property_changed.subscriber_count == 1
        assert all_customers.all_customers.collection_changed.subscriber_count == 1


class TestSelectedTotal:
    """The aggregate over selected members"""

    def test_nothing_selected(self, all_customers):
        assert all_customers.total_selected_sales == 0

    def test_sum_of_selected(self, all_customers):
        members = all_customers.all_customers
        members[0].is_selected = True
        members[2].is_selected = True

        assert all_customers.total_selected_sales == pytest.approx(140.25)

    def test_total_follows_any_toggle_sequence(self, all_customers):
        members = all_customers.all_customers
        toggles = [0, 1, 1, 2, 0, 1, 2, 2, 0]

        for index in toggles:
            members[index].is_selected = not members[index].is_selected
            expected = sum(m.total_sales for m in members if m.is_selected)
            assert all_customers.total_selected_sales == pytest.approx(expected)

    def test_selection_changes_fire_the_total(self, all_customers, listen):
        received = listen(all_customers.property_changed)
        member = all_customers.all_customers[0]

        member.is_selected = True
        member.is_selected = False

        assert received == ["total_selected_sales", "total_selected_sales"]

    def test_other_edits_do_not_fire_the_total(self, all_customers, listen):
        received = listen(all_customers.property_changed)
        member = all_customers.all_customers[0]
        member.is_selected = True
        received.clear()

        member.first_name = "Joshua"
        member.email = "joshua@example.com"
        member.customer_type = CustomerType.COMPANY
        member.last_name = None

        assert received == []
        assert all_customers.total_selected_sales == pytest.approx(100.0)


class TestRepositoryMirroring:

    def test_added_customer_is_appended_and_wired(self, all_customers, repository, listen):
        received = listen(all_customers.property_changed)
        customer = new_customer(5.0)

        repository.add_customer(customer)

        added = all_customers.all_customers[-1]
        assert len(all_customers.all_customers) == 4
        assert added.wraps(customer)

        added.is_selected = True
        assert received == ["total_selected_sales"]
        assert all_customers.total_selected_sales == pytest.approx(5.0)

    def test_saving_a_new_customer_adds_it_to_the_list(self, all_customers, repository):
        editor = CustomerViewModel(Customer.create_new_customer(), repository)
        editor.customer_type = CustomerType.COMPANY
        editor.first_name = "Fabrikam"
        editor.email = "info@fabrikam.example.com"

        editor.save_command.execute()

        assert len(all_customers.all_customers) == 4
        assert all_customers.all_customers[-1].display_name == "Fabrikam"

    def test_known_customer_is_not_wrapped_twice(self, all_customers, repository, customers):
        repository.customer_added.emit(repository, CustomerAddedEventArgs(customers[1]))

        assert len(all_customers.all_customers) == 3

    def test_repeated_add_is_ignored(self, all_customers, repository):
        customer = new_customer()
        repository.add_customer(customer)
        repository.add_customer(customer)

        assert len(all_customers.all_customers) == 4


class TestCollectionWiring:
    """Subscriptions follow membership changes, whatever made them"""

    def test_direct_append_is_wired(self, all_customers, repository, listen):
        received = listen(all_customers.property_changed)
        view_model = CustomerViewModel(new_customer(), repository)

        all_customers.all_customers.append(view_model)
        view_model.is_selected = True

        assert received == ["total_selected_sales"]

    def test_removed_member_is_unwired(self, all_customers, listen):
        received = listen(all_customers.property_changed)
        member = all_customers.all_customers[0]

        all_customers.all_customers.remove(member)
        member.is_selected = True

        assert received == []
        assert member.property_changed.subscriber_count == 0
        assert all_customers.total_selected_sales == 0

    def test_second_wrapper_of_a_listed_customer_is_rejected(self, all_customers, repository, customers):
        duplicate = CustomerViewModel(customers[0], repository)

        with pytest.raises(ArgumentError):
            all_customers.all_customers.append(duplicate)

        wrappers = [m for m in all_customers.all_customers if m.wraps(customers[0])]
        assert len(wrappers) == 1
        assert duplicate.property_changed.subscriber_count == 0

        for member in wrappers:
            member.is_selected = True
        duplicate.is_selected = True
        assert all_customers.total_selected_sales == pytest.approx(100.0)

    def test_same_wrapper_cannot_be_listed_twice(self, all_customers):
        member = all_customers.all_customers[1]

        with pytest.raises(ArgumentError):
            all_customers.all_customers.insert(0, member)

        assert len(all_customers.all_customers) == 3

    def test_replacing_a_member_with_a_new_wrapper_of_its_customer(self, all_customers, repository,
                                                                   customers, listen):
        received = listen(all_customers.property_changed)
        old = all_customers.all_customers[0]
        replacement = CustomerViewModel(customers[0], repository)

        all_customers.all_customers[0] = replacement
        replacement.is_selected = True

        assert old.property_changed.subscriber_count == 0
        assert received == ["total_selected_sales"]
        assert all_customers.total_selected_sales == pytest.approx(100.0)

    def test_replacing_with_a_wrapper_of_another_member_is_rejected(self, all_customers, repository,
                                                                     customers):
        with pytest.raises(ArgumentError):
            all_customers.all_customers[0] = CustomerViewModel(customers[1], repository)

        assert all_customers.all_customers[0].wraps(customers[0])


class TestDispose:

    def test_dispose_unhooks_everything(self, repository):
        view_model = AllCustomersViewModel(repository)
        members = list(view_model.all_customers)
        collection = view_model.all_customers

        view_model.dispose()

        assert len(collection) == 0
        assert collection.collection_changed.subscriber_count == 0
        assert collection.collection_changing.subscriber_count == 0
        assert repository.customer_added.subscriber_count == 0
        for member in members:
            assert member.property_changed.subscriber_count == 0

    def test_repository_additions_after_dispose_are_ignored(self, repository):
        view_model = AllCustomersViewModel(repository)
        view_model.dispose()

        repository.add_customer(new_customer())

        assert len(view_model.all_customers) == 0

    def test_dispose_twice_is_harmless(self, repository):
        view_model = AllCustomersViewModel(repository)

        view_model.dispose()
        view_model.dispose()

        assert len(view_model.all_customers) == 0
        assert repository.customer_added.subscriber_count == 0
