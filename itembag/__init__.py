# itembag/__init__.py
"""
Item Bag.
A fixed-slot player inventory with a pygame slot view kept in sync.
"""
