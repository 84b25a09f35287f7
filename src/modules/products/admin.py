from django.contrib import admin

from modules.products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "under_sale", "creation_date")
    list_filter = ("under_sale",)
    search_fields = ("name",)
    readonly_fields = ("creation_date", "created_at", "updated_at")
