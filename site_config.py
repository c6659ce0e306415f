from dataclasses import dataclass


@dataclass(frozen=True)
class SiteConfig:
    # The app's title; used in the browser tab and the sidebar.
    title: str
    # Content for the head of the page, e.g. a favicon link.
    head: str = ""
    # The path to the source root (page scripts).
    root: str = "pages"
    # What to show in the header (HTML).
    header: str = ""
    # What to show in the footer (HTML).
    footer: str = ""
    # Whether to show the navigation in the sidebar.
    sidebar: bool = True
    # Whether to show previous & next links in the footer.
    pager: bool = True


SITE = SiteConfig(
    title="Datavisualisatie",
    head='<link rel="icon" href="assets/favicon.png" type="image/png" sizes="32x32">',
    root="pages",
    footer="Gemaakt door Emma, Robin en Matthias",
    pager=False,
)
