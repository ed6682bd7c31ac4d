"""Salon CRM backend: customers, products, B2B clients and menu items."""
