# tests/test_bag_view.py
from tests.fixtures import PygameTestBase, RecordingDetail, RecordingSlot
from itembag.config import EMPTY_SLOT_QUANTITY
from itembag.items.bag import ItemBag
from itembag.ui.bag_view import ItemBagView
from itembag.ui.slot_view import ItemSlot

class TestBagView(PygameTestBase):

    slot_number = 4

    def setUp(self):
        super().setUp()
        self.detail = RecordingDetail()
        self.view = ItemBagView(self.bag, self.item_table, self.detail, slot_factory=RecordingSlot)

    def shown(self):
        return [(slot.item.item_id if slot.item else None, slot.quantity) for slot in self.view.all_slots]

    def test_one_slot_per_bag_slot_all_empty(self):
        self.assertEqual(len(self.view.all_slots), 4)
        self.assertEqual(self.shown(), [(None, EMPTY_SLOT_QUANTITY)] * 4)
        self.assertEqual(self.detail.refresh_count, 1)

    def test_add_refreshes_slots(self):
        self.assertTrue(self.view.add_item(2, 3))
        self.assertTrue(self.view.add_item(1, 1))

        self.assertEqual(self.shown(), [(2, 3), (1, 1), (None, -1), (None, -1)])
        self.assertEqual(self.view.all_slots[0].item.name, "Iron Sword") # type: ignore[union-attr]

    def test_remove_refreshes_and_shifts(self):
        self.view.add_item(1, 1)
        self.view.add_item(2, 1)
        self.view.add_item(3, 1)
        self.assertTrue(self.view.remove_item(1, 1))

        self.assertEqual(self.shown(), [(2, 1), (3, 1), (None, -1), (None, -1)])

    def test_failed_mutation_does_not_refresh(self):
        before = self.detail.refresh_count
        self.assertFalse(self.view.remove_item(1, 1))
        self.assertFalse(self.view.add_item(1, 0))
        self.assertEqual(self.detail.refresh_count, before)

    def test_direct_bag_changes_show_after_refresh(self):
        """The view pulls from the bag; it is not notified."""
        self.bag.add_item(4, 9)
        self.assertEqual(self.shown()[0], (None, -1))

        self.view.refresh()
        self.assertEqual(self.shown()[0], (4, 9))

    def test_unknown_id_shows_empty_and_warns(self):
        self.bag.add_item(99, 1)
        self.bag.add_item(1, 2)
        self.view.refresh()

        self.assertEqual(self.shown()[:2], [(None, -1), (1, 2)])
        self.assertIn("No descriptor for item id 99", self.log_output)

    def test_interaction_reaches_item_detail(self):
        self.view.add_item(3, 2)
        slot = self.view.all_slots[0]
        slot.interact()

        bag_view, item, number, clicked = self.detail.clicks[-1]
        self.assertIs(bag_view, self.view)
        self.assertEqual(item.item_id, 3)
        self.assertEqual(number, 2)
        self.assertIs(clicked, slot)

    def test_empty_slot_interaction_passes_none(self):
        self.view.all_slots[3].interact()
        _, item, number, _ = self.detail.clicks[-1]
        self.assertIsNone(item)
        self.assertEqual(number, EMPTY_SLOT_QUANTITY)

    def test_no_detail_is_fine(self):
        view = ItemBagView(ItemBag(2), self.item_table, slot_factory=RecordingSlot)
        view.add_item(1, 1)
        view.all_slots[0].interact()

    def test_grid_layout(self):
        view = ItemBagView(ItemBag(7), self.item_table, origin=(10, 20), columns=3)
        self.assertEqual(view.slot_rect(0).topleft, (10, 20))
        self.assertEqual(view.slot_rect(1).x, view.slot_rect(0).right + 8)
        self.assertEqual(view.slot_rect(3).x, 10)
        self.assertGreater(view.slot_rect(3).y, view.slot_rect(2).y)
        self.assertTrue(all(isinstance(s, ItemSlot) for s in view.all_slots))

class TestItemSlotEvents(PygameTestBase):

    def setUp(self):
        super().setUp()
        self.detail = RecordingDetail()
        self.view = ItemBagView(self.bag, self.item_table, self.detail)
        self.view.add_item(1, 5)

    def test_left_click_on_slot(self):
        rect = self.view.all_slots[0].rect # type: ignore[attr-defined]
        self.assertTrue(self.view.handle_event(self.click_event(rect.center)))
        self.assertEqual(self.detail.clicks[-1][2], 5)

    def test_right_click_and_miss_are_ignored(self):
        rect = self.view.all_slots[0].rect # type: ignore[attr-defined]
        self.assertFalse(self.view.handle_event(self.click_event(rect.center, button=3)))
        self.assertFalse(self.view.handle_event(self.click_event((630, 470))))
        self.assertEqual(self.detail.clicks, [])

    def test_draw_runs_headless(self):
        self.view.add_item(2, 1)
        self.view.all_slots[1].selected = True
        self.view.draw(self.screen)
        rect = self.view.all_slots[1].rect # type: ignore[attr-defined]
        self.assertNotEqual(tuple(self.screen.get_at(rect.center))[:3], (0, 0, 0))
