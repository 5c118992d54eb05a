from django.conf import settings

from .navigation import build_nav_items


def site_shell(request):
    """Values every page needs: site title and the navigation links."""
    user = getattr(request, 'user', None)
    return {
        'site_title': settings.SITE_TITLE,
        'site_description': settings.SITE_DESCRIPTION,
        'nav_items': build_nav_items(request.path, bool(user and user.is_authenticated)),
    }
