# src/api/routers/importproductRoute.py
import io
from typing import Literal, Optional

import pandas as pd
from fastapi import APIRouter, File, Query, UploadFile
from fastapi.responses import StreamingResponse
from sqlmodel import desc, func, select

from src.api.core.csv_parser import REQUIRED_COLUMNS, parse_upload
from src.api.core.dependencies import GetSession, requireImportAdmin
from src.api.core.response import api_response, raiseExceptions
from src.api.models.product_model import (
    ImportHistoryRead,
    ProductImportHistory,
    UndoRequest,
)
from src.api.services.import_undo_service import (
    ImportNotFoundError,
    ImportTargetNotFoundError,
    ImportUndoService,
)
from src.api.services.product_import_service import ProductImportService

router = APIRouter(prefix="/product", tags=["Product Import"])

TEMPLATE_SAMPLE_ROW = {
    "Product Name": "Sample Product",
    "Description": "Sample product description",
    "Ingredients": "Sample ingredients",
    "Price": 100,
    "Discount (%)": 5,
    "Slug": "sample-product",
    "Active": "TRUE",
    "Out of Stock": "FALSE",
    "Featured": "FALSE",
    "Top Selling": "FALSE",
    "New Arrival": "FALSE",
    "Best Selling": "FALSE",
    "Special": "FALSE",
    "Grocery": "FALSE",
    "Brand": "Sample Brand",
    "Categories": "Category1, Category2",
    "Images": "modern-tech-product.png,placeholder.jpg",
    "Variant SKU": "SAMPLE-SKU",
    "Variant Label": "100g",
    "Variant Slug": "sample-product-100g",
    "Variant Price": 100,
    "Variant Discount (%)": 5,
    "Variant Stock": 50,
    "Variant Active": "TRUE",
    "Variant Out of Stock": "FALSE",
}


@router.post("/import-csv")
def import_products_from_csv(
    session: GetSession,
    user: requireImportAdmin,
    file: Optional[UploadFile] = File(None),
):
    """
    Import products and variants from a CSV (or Excel) feed.
    Existing products (by slug) and variants (by SKU) are overwritten, new ones are created.
    Row level failures are returned in `errors`/`error_details`, they never fail the request.
    """
    raiseExceptions((file, 400, "No CSV file provided"))

    contents = file.file.read()
    raiseExceptions((contents, 400, "No CSV file provided"))

    rows = parse_upload(file.filename, contents)
    raiseExceptions((rows, 400, "No valid data found in CSV"))

    service = ProductImportService(session)
    result = service.import_rows(rows, actor_id=user.get("id"), file_name=file.filename)

    return api_response(
        200,
        "CSV import completed",
        {
            "import_id": service.import_id,
            "results": result.summary(),
        },
    )


@router.post("/undo-import")
def undo_import(
    request: UndoRequest,
    session: GetSession,
    user: requireImportAdmin,
):
    """
    Undo a whole import, or only one product / variant of it.
    Targets that were already deleted are skipped.
    """
    service = ImportUndoService(session)
    try:
        if request.product_id is not None:
            result = service.undo_product(request.import_id, request.product_id, user.get("id"))
            message = "Product successfully undone"
        elif request.variant_id is not None:
            result = service.undo_variant(request.import_id, request.variant_id, user.get("id"))
            message = "Variant successfully undone"
        else:
            result = service.undo_import(request.import_id, user.get("id"))
            message = "Import successfully undone"
    except (ImportNotFoundError, ImportTargetNotFoundError) as e:
        session.rollback()
        return api_response(404, str(e))

    return api_response(200, message, result)


@router.get("/import-history")
def get_import_history(
    session: GetSession,
    user: requireImportAdmin,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
):
    """
    Imports run by the current user, newest first
    """
    offset = (page - 1) * limit

    total_count = session.exec(
        select(func.count(ProductImportHistory.id)).where(
            ProductImportHistory.imported_by == user.get("id")
        )
    ).one()

    histories = session.exec(
        select(ProductImportHistory)
        .where(ProductImportHistory.imported_by == user.get("id"))
        .order_by(desc(ProductImportHistory.imported_at), desc(ProductImportHistory.id))
        .offset(offset)
        .limit(limit)
    ).all()

    data = [ImportHistoryRead.model_validate(history) for history in histories]
    return api_response(200, "Import history retrieved", data, total_count)


@router.get("/import-history/{import_id}")
def get_import_history_detail(
    import_id: str,
    session: GetSession,
    user: requireImportAdmin,
):
    history = session.exec(
        select(ProductImportHistory).where(ProductImportHistory.import_id == import_id)
    ).first()
    raiseExceptions((history, 404, "Import record not found"))

    return api_response(
        200, "Import details retrieved", ImportHistoryRead.model_validate(history)
    )


@router.get("/import-template")
def download_import_template(
    user: requireImportAdmin,
    file_format: Literal["csv", "xlsx"] = Query("csv", alias="format"),
):
    """
    Download an import template with every required column and one sample row
    """
    df = pd.DataFrame([TEMPLATE_SAMPLE_ROW], columns=REQUIRED_COLUMNS)

    if file_format == "xlsx":
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Products", index=False)

            # Auto-adjust column widths
            worksheet = writer.sheets["Products"]
            for idx, col in enumerate(df.columns, start=1):
                max_len = max(df[col].astype(str).str.len().max(), len(col)) + 2
                worksheet.column_dimensions[
                    worksheet.cell(row=1, column=idx).column_letter
                ].width = min(max_len, 30)
        output.seek(0)

        return StreamingResponse(
            output,
            media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            headers={"Content-Disposition": "attachment; filename=products-template.xlsx"},
        )

    output = io.StringIO()
    df.to_csv(output, index=False)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=products-template.csv"},
    )
