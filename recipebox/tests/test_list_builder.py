import unittest
from recipebox.domain.Recipe import Recipe
from recipebox.domain.ShoppingList import CATEGORIES
from recipebox.logic.shopping.list_builder import build_shopping_list, combine_quantities
from recipebox.utilities.ids import CounterIdFactory


def _content(item):
    return (item["item"], item["quantity"], item["unit"], item["category"], item["checked"])


class TestBuildShoppingList(unittest.TestCase):

    def setUp(self):
        self.recipes = {
            "r1": Recipe(id="r1", name="Bread", ingredients=["1 cup flour", "2 large eggs", "salt to taste"]),
            "r2": Recipe(id="r2", name="Cake", ingredients=["1 cup flour", "1/2 cup sugar"]),
            "r3": Recipe(id="r3", name="Sauce", ingredients=["2 tbsp flour", "salt to taste", "1/2 cup sugar"]),
        }

    def build(self, ids):
        return build_shopping_list(ids, self.recipes.get, new_id=CounterIdFactory())

    def test_same_unit_quantities_are_added(self):
        result = self.build(["r1", "r2"])
        pantry = result["Pantry"]
        flour = [i for i in pantry if i["item"] == "flour"]
        self.assertEqual(len(flour), 1)
        self.assertEqual(_content(flour[0]), ("flour", "2", "cup", "Pantry", False))
        self.assertEqual(flour[0]["original"], "1 cup flour")

    def test_different_units_append_original(self):
        self.recipes["r2"] = Recipe(id="r2", ingredients=["2 tbsp flour"])
        flour = [i for i in self.build(["r1", "r2"])["Pantry"] if i["item"] == "flour"][0]
        self.assertEqual(flour["quantity"], "1")
        self.assertEqual(flour["unit"], "cup")
        self.assertEqual(flour["original"], "1 cup flour, 2 tbsp flour")

    def test_missing_quantity_appends_original(self):
        salt = [i for i in self.build(["r1", "r3"])["Pantry"] if i["item"] == "salt to taste"][0]
        self.assertEqual(salt["quantity"], "")
        self.assertEqual(salt["original"], "salt to taste, salt to taste")

    def test_fractions_read_as_leading_number(self):
        sugar = [i for i in self.build(["r2", "r3"])["Pantry"] if i["item"] == "sugar"][0]
        self.assertEqual(sugar["quantity"], "2")

    def test_quantity_added_to_empty_quantity(self):
        self.recipes["a"] = Recipe(id="a", ingredients=["eggs"])
        self.recipes["b"] = Recipe(id="b", ingredients=["3 eggs"])
        eggs = self.build(["a", "b"])["Dairy & Eggs"][0]
        self.assertEqual((eggs["item"], eggs["quantity"]), ("eggs", "3"))

    def test_all_categories_present_in_order(self):
        for ids in ([], ["r1"], ["missing"]):
            result = self.build(ids)
            self.assertEqual(list(result.keys()), list(CATEGORIES))
            for items in result.values():
                self.assertIsInstance(items, list)

    def test_empty_input(self):
        result = self.build([])
        self.assertTrue(all(items == [] for items in result.values()))

    def test_unknown_recipe_skipped(self):
        with_missing = self.build(["nope", "r1", "gone"])
        only_r1 = self.build(["r1"])
        strip = lambda sl: {c: [_content(i) for i in items] for c, items in sl.items()}
        self.assertEqual(strip(with_missing), strip(only_r1))

    def test_first_seen_order_and_ids(self):
        result = self.build(["r1", "r2"])
        self.assertEqual([i["item"] for i in result["Pantry"]], ["flour", "salt to taste", "sugar"])
        self.assertEqual(result["Pantry"][0]["id"], "flour_1")
        ids = [i["id"] for items in result.values() for i in items]
        self.assertEqual(len(ids), len(set(ids)))

    def test_every_item_in_its_own_category(self):
        result = self.build(["r1", "r2", "r3"])
        for category, items in result.items():
            for item in items:
                self.assertEqual(item["category"], category)
                self.assertFalse(item["checked"])

    def test_item_key_is_case_sensitive(self):
        self.recipes["a"] = Recipe(id="a", ingredients=["1 cup Flour", "1 cup flour"])
        items = self.build(["a"])["Pantry"]
        self.assertEqual(sorted(i["item"] for i in items), ["Flour", "flour"])


class TestCombineQuantities(unittest.TestCase):

    def test_combine(self):
        self.assertEqual(combine_quantities("1", "1"), "2")
        self.assertEqual(combine_quantities("0.5", "0.25"), "0.75")
        self.assertEqual(combine_quantities("1/2", "1/4"), "2")
        self.assertEqual(combine_quantities("", "3"), "3")
        self.assertEqual(combine_quantities("/", "."), "0")
        self.assertEqual(combine_quantities("1.5", "1"), "2.5")


if __name__ == '__main__':
    unittest.main()
