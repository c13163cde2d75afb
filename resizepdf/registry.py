# resizepdf/registry.py
from typing import Dict, List

TOOLS: List[Dict[str, str]] = [
    {
        "name": "Merge PDF",
        "path": "/api/merge-pdf",
        "description": "Combine two or more PDFs into one, in the order you upload them.",
    },
    {
        "name": "Split PDF",
        "path": "/api/split-pdf",
        "description": "Split every page, split by page ranges, or extract selected pages.",
    },
    {
        "name": "Compress PDF",
        "path": "/api/compress-pdf",
        "description": "Shrink a PDF losslessly at low, medium or high strength.",
    },
    {
        "name": "Rotate PDF",
        "path": "/api/rotate-pdf",
        "description": "Rotate every page by 90, 180 or 270 degrees.",
    },
    {
        "name": "Protect PDF",
        "path": "/api/protect-pdf",
        "description": "Mark a PDF as password protected.",
    },
    {
        "name": "Unlock PDF",
        "path": "/api/unlock-pdf",
        "description": "Remove the protection mark from a PDF.",
    },
    {
        "name": "Enhance PDF",
        "path": "/api/enhance-pdf",
        "description": "Refresh document metadata and optimize the file structure.",
    },
    {
        "name": "JPG to PDF",
        "path": "/api/jpg-to-pdf",
        "description": "Turn one or more images into a PDF, one page per image.",
    },
    {
        "name": "PDF to JPG",
        "path": "/api/pdf-to-jpg",
        "description": "Get one image per PDF page.",
    },
    {
        "name": "PDF to Word",
        "path": "/api/pdf-to-word",
        "description": "Download a Word document for your PDF.",
    },
    {
        "name": "PDF to Excel",
        "path": "/api/pdf-to-excel",
        "description": "Download a spreadsheet (CSV) for your PDF.",
    },
    {
        "name": "PDF to PowerPoint",
        "path": "/api/pdf-to-powerpoint",
        "description": "Download a slide outline for your PDF.",
    },
    {
        "name": "Word to PDF",
        "path": "/api/word-to-pdf",
        "description": "Upload a Word document and download a PDF.",
    },
    {
        "name": "Excel to PDF",
        "path": "/api/excel-to-pdf",
        "description": "Upload a spreadsheet and download a PDF.",
    },
    {
        "name": "PowerPoint to PDF",
        "path": "/api/powerpoint-to-pdf",
        "description": "Upload a presentation and download a PDF.",
    },
]
